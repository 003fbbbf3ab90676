# pandoc_filter/application/filter.py

"""Filter entry point: text in, transform, text out"""

# Standard library imports
from collections.abc import Callable
from json import JSONDecodeError
from json import dumps
from json import loads
from logging import getLogger

# Local imports
from pandoc_filter.application.codec import decode_document
from pandoc_filter.application.codec import encode_document
from pandoc_filter.core.domain.document import Pandoc
from pandoc_filter.core.domain.errors import ParseError
from pandoc_filter.infrastructure.config import OutputConfig

logger = getLogger(__name__)

type Transform = Callable[[Pandoc], Pandoc]


def _reject_constant(name: str) -> float:
    # json accepts NaN/Infinity by default; they are not JSON
    raise ValueError(f"{name} is not valid JSON")


def parse_json(input_text: str) -> object:
    """Parse document text into generic JSON

    Raises:
        ParseError: If the text is not valid JSON
    """
    try:
        return loads(input_text, parse_constant=_reject_constant)
    except JSONDecodeError as e:
        raise ParseError(f"Invalid JSON: {e.msg}", e.lineno, e.colno) from e
    except ValueError as e:
        raise ParseError(f"Invalid JSON: {e}") from e


def filter(
    input_text: str,
    transform: Transform,
    *,
    output: OutputConfig | None = None,
) -> str:
    """Decode a document, apply ``transform`` and encode the result

    Args:
        input_text: Serialized document in the external JSON format
        transform: Pure function from document to document; anything it
            raises propagates unchanged
        output: Serialization options, compact UTF-8 output when None

    Returns:
        The transformed document, serialized

    Raises:
        ParseError: If ``input_text`` is not valid JSON
        DecodeError: If the JSON does not have the document shape
        EncodeError: If the transformed document cannot be serialized
    """
    options = output if output is not None else OutputConfig()

    data = parse_json(input_text)
    document = decode_document(data)  # type: ignore[arg-type]

    result = transform(document)

    encoded = encode_document(result)
    text = dumps(
        encoded,
        ensure_ascii=options.ensure_ascii,
        indent=options.indent,
        sort_keys=options.sort_keys,
        separators=None if options.indent is not None else (",", ":"),
    )
    logger.debug(f"Filter produced {len(text):,} characters of output")
    return text
