import pytest

from enhance.dom import parse_fragment, text_content
from enhance.errors import UnresolvedTemplateError
from enhance.expand import attrs_to_state, expand_template
from enhance.serialize import serialize
from enhance.state import RenderState
from enhance.transcode import ValueCodec


def _state():
    return RenderState(context={}, instance_id="abc1234", store={})


def _node(markup):
    return parse_fragment(markup).children[0]


def test_attrs_are_decoded_into_state():
    codec = ValueCodec()
    items = [1, 2]
    token = codec.encode(items)
    attrs = attrs_to_state({"items": token, "title": "Hi"}, codec)
    assert attrs == {"items": items, "title": "Hi"}
    assert attrs["items"] is items


def test_render_function_receives_builder_and_state():
    codec = ValueCodec()
    seen = {}

    def greet(html, state):
        seen["html"] = html
        seen["state"] = state
        return html(["<p>", "</p>"], state.attrs["name"])

    state = _state()
    expansion = expand_template(_node('<x-greet name="Ada"></x-greet>'), {"x-greet": greet}, state, codec)

    assert serialize(expansion.fragment) == "<p>Ada</p>"
    assert seen["state"] is state
    assert state.attrs == {"name": "Ada"}
    assert seen["html"]("<b></b>") == "<b></b>"


def test_resources_are_split_from_fragment():
    def widget(html, state):
        return (
            '<style>.a{}</style><link rel="stylesheet" href="a.css">'
            "<div>body</div><script>go()</script><p>more</p>"
        )

    expansion = expand_template(_node("<x-w></x-w>"), {"x-w": widget}, _state(), ValueCodec())

    assert serialize(expansion.fragment) == "<div>body</div><p>more</p>"
    assert [text_content(style) for style in expansion.styles] == [".a{}"]
    assert [text_content(script) for script in expansion.scripts] == ["go()"]
    assert [link.attrs["href"] for link in expansion.links] == ["a.css"]
    assert all(node.parent is None for node in expansion.styles + expansion.scripts + expansion.links)


def test_adjacent_resources_are_all_removed():
    def widget(html, state):
        return "<script>a()</script><script>b()</script><style>.x{}</style><style>.y{}</style>"

    expansion = expand_template(_node("<x-w></x-w>"), {"x-w": widget}, _state(), ValueCodec())

    assert expansion.fragment.children == []
    assert [text_content(s) for s in expansion.scripts] == ["a()", "b()"]
    assert [text_content(s) for s in expansion.styles] == [".x{}", ".y{}"]


def test_transforms_apply_in_order():
    calls = []

    def first(attrs, raw, tag_name, *rest):
        calls.append(("first", raw, tag_name, rest))
        return raw + "/*1*/"

    def second(attrs, raw, tag_name, *rest):
        calls.append(("second", raw, tag_name, rest))
        return raw + "/*2*/"

    def widget(html, state):
        return '<style>.a{}</style><script type="module">run()</script>'

    expansion = expand_template(
        _node("<x-w></x-w>"),
        {"x-w": widget},
        _state(),
        ValueCodec(),
        script_transforms=[first, second],
        style_transforms=[first, second],
    )

    assert text_content(expansion.styles[0]) == ".a{}/*1*//*2*/"
    assert text_content(expansion.scripts[0]) == "run()/*1*//*2*/"
    assert calls == [
        ("first", ".a{}", "x-w", ("markup",)),
        ("second", ".a{}/*1*/", "x-w", ("markup",)),
        ("first", "run()", "x-w", ()),
        ("second", "run()/*1*/", "x-w", ()),
    ]


def test_transform_sees_element_attrs():
    seen = []

    def transform(attrs, raw, tag_name):
        seen.append(dict(attrs))
        return raw

    def widget(html, state):
        return '<script type="module">x()</script>'

    expand_template(_node("<x-w></x-w>"), {"x-w": widget}, _state(), ValueCodec(), script_transforms=[transform])
    assert seen == [{"type": "module"}]


def test_transform_errors_propagate():
    def broken(attrs, raw, tag_name, context):
        raise RuntimeError("boom")

    def widget(html, state):
        return "<style>.a{}</style>"

    with pytest.raises(RuntimeError, match="boom"):
        expand_template(_node("<x-w></x-w>"), {"x-w": widget}, _state(), ValueCodec(), style_transforms=[broken])


def test_missing_template_function():
    with pytest.raises(UnresolvedTemplateError, match="Could not find the template function for x-missing") as info:
        expand_template(_node("<x-missing></x-missing>"), {}, _state(), ValueCodec())
    assert info.value.code == "missing-template-function"
    assert info.value.tag_name == "x-missing"


def test_non_callable_template():
    with pytest.raises(UnresolvedTemplateError) as info:
        expand_template(_node("<x-w></x-w>"), {"x-w": "<p></p>"}, _state(), ValueCodec())
    assert info.value.code == "template-not-callable"
    assert isinstance(info.value, LookupError)


def test_none_from_render_function_is_empty():
    expansion = expand_template(_node("<x-w></x-w>"), {"x-w": lambda html, state: None}, _state(), ValueCodec())
    assert expansion.fragment.children == []
