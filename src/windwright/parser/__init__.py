from windwright.parser.arbitrary import decode_arbitrary
from windwright.parser.candidate import parse_candidate
from windwright.parser.errors import ParseError
from windwright.parser.segment import segment
from windwright.parser.variant import parse_variant

__all__ = ["ParseError", "decode_arbitrary", "parse_candidate", "parse_variant", "segment"]
