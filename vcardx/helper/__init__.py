from .config import get_buffer, logger
from .constants import DEFAULT_CHARSET, PRODUCT_ID, VERSION, XML_NAMESPACE, Character
from .converter import to_list, to_list_or_string, to_string, to_unicode, to_vname
from .funcs import byte_decoder, byte_encoder, byte_width, is_charset, qp_decode, qp_encode
