from .custom_element import is_custom_element
from .enhancer import Enhancer, SeparatedHTML
from .errors import EnhanceError, MalformedDocumentError, UnresolvedTemplateError
from .state import RenderState
from .transcode import ValueCodec

__all__ = [
    "EnhanceError",
    "Enhancer",
    "MalformedDocumentError",
    "RenderState",
    "SeparatedHTML",
    "UnresolvedTemplateError",
    "ValueCodec",
    "is_custom_element",
]
