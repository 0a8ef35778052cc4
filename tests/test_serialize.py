from enhance.dom import create_element, create_text, parse_document, parse_fragment
from enhance.serialize import serialize, serialize_outer


def test_document_round_trip():
    html = '<!DOCTYPE html><html lang="en"><head><title>T</title></head><body><p class="a">x</p></body></html>'
    assert serialize(parse_document(html)) == html


def test_text_is_escaped_but_raw_text_is_not():
    fragment = parse_fragment("<p>a &amp; b &lt; c</p><script>if (a < b && c) {}</script><style>a > b {}</style>")
    assert serialize(fragment) == "<p>a &amp; b &lt; c</p><script>if (a < b && c) {}</script><style>a > b {}</style>"


def test_attribute_values_are_quoted_and_escaped():
    node = create_element("a", {"title": 'say "hi" & go', "hidden": ""})
    assert serialize_outer(node) == '<a title="say &quot;hi&quot; &amp; go" hidden=""></a>'


def test_void_elements_have_no_end_tag():
    fragment = parse_fragment('<br><img src="a.png"><link rel="icon" href="f.ico">')
    assert serialize(fragment) == '<br><img src="a.png"><link rel="icon" href="f.ico">'


def test_serialize_is_inner_and_serialize_outer_includes_tag():
    node = create_element("div", {"id": "x"})
    node.append_child(create_text("hi"))
    assert serialize(node) == "hi"
    assert serialize_outer(node) == '<div id="x">hi</div>'


def test_comments():
    assert serialize(parse_fragment("<!-- note --><p></p>")) == "<!-- note --><p></p>"


def test_template_content_is_serialized():
    fragment = parse_fragment("<template><p>inside</p></template>")
    assert serialize(fragment) == "<template><p>inside</p></template>"


def test_fragment_keeps_table_parts_and_resources():
    fragment = parse_fragment('<tr><td>a</td></tr><style>.a{}</style><link rel="x">')
    assert serialize(fragment) == '<tr><td>a</td></tr><style>.a{}</style><link rel="x">'
