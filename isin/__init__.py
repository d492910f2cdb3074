"""isin — validated International Securities Identification Numbers (ISO 6166).

    >>> from isin import parse, unwrap
    >>> isin = unwrap(parse("US0378331005"))
    >>> isin.prefix, isin.body, isin.check_digit
    ('US', '037833100', '5')
"""

from isin.core import ISIN as ISIN
from isin.core import Err as Err
from isin.core import IncorrectCheckDigit as IncorrectCheckDigit
from isin.core import InvalidBody as InvalidBody
from isin.core import InvalidBodyLength as InvalidBodyLength
from isin.core import InvalidCheckDigit as InvalidCheckDigit
from isin.core import InvalidLength as InvalidLength
from isin.core import InvalidPayloadLength as InvalidPayloadLength
from isin.core import InvalidPrefix as InvalidPrefix
from isin.core import InvalidPrefixLength as InvalidPrefixLength
from isin.core import ISINError as ISINError
from isin.core import Ok as Ok
from isin.core import build_from_parts as build_from_parts
from isin.core import build_from_payload as build_from_payload
from isin.core import compute_check_digit as compute_check_digit
from isin.core import parse as parse
from isin.core import parse_loose as parse_loose
from isin.core import unwrap as unwrap
from isin.core import validate as validate
from isin.core import validate_detail as validate_detail

__version__ = "0.2.0"
