''' Line grammar '''

import pyparsing as pp

from temu.common.hwconf import LABEL_MARKER
from temu.common.errors import UnknownInstruction


# Everything str.strip() removes; the highest such code point is U+3000
WHITESPACE = ''.join(chr(c) for c in range(0x3001) if chr(c).isspace())

token = pp.Regex(r'\S+').set_whitespace_chars(WHITESPACE)

# <command> <operand>*
statement = token + pp.ZeroOrMore(token)

integer = pp.Regex('[+-]?[0-9]+').set_parse_action(lambda r: int(r[0]))


def is_label(text: str) -> bool:
    return text.startswith(LABEL_MARKER)


def label_name(text: str) -> str:
    return text[len(LABEL_MARKER):]


def split_statement(text: str) -> tuple[str, list[str]]:
    ''' Command and operand tokens of a non-empty, non-label trimmed line '''
    try:
        tokens = statement.parse_string(text, parse_all=True).as_list()
    except pp.ParseException as e:
        raise UnknownInstruction(f'Unknown or invalid instruction: {text}') from e

    return (tokens[0], tokens[1:])


def parse_integer(text: str) -> int | None:
    try:
        return integer.parse_string(text, parse_all=True)[0]
    except pp.ParseException:
        return None
