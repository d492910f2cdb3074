"""isin.core — public API for the checksum engine, error values and the ISIN type."""

from isin.core.checksum import ChecksumContractError as ChecksumContractError
from isin.core.checksum import checksum_functional as checksum_functional
from isin.core.checksum import checksum_table as checksum_table
from isin.core.checksum import compute_check_digit as compute_check_digit
from isin.core.errors import IncorrectCheckDigit as IncorrectCheckDigit
from isin.core.errors import InvalidBody as InvalidBody
from isin.core.errors import InvalidBodyLength as InvalidBodyLength
from isin.core.errors import InvalidCheckDigit as InvalidCheckDigit
from isin.core.errors import InvalidLength as InvalidLength
from isin.core.errors import InvalidPayloadLength as InvalidPayloadLength
from isin.core.errors import InvalidPrefix as InvalidPrefix
from isin.core.errors import InvalidPrefixLength as InvalidPrefixLength
from isin.core.errors import ISINError as ISINError
from isin.core.identifier import ISIN as ISIN
from isin.core.identifier import build_from_parts as build_from_parts
from isin.core.identifier import build_from_payload as build_from_payload
from isin.core.identifier import parse as parse
from isin.core.identifier import parse_loose as parse_loose
from isin.core.identifier import validate as validate
from isin.core.identifier import validate_detail as validate_detail
from isin.core.result import Err as Err
from isin.core.result import Ok as Ok
from isin.core.result import Result as Result
from isin.core.result import partition as partition
from isin.core.result import unwrap as unwrap
