"""
demo_isin.py -- A walkthrough of parsing, building and screening ISINs.

An ISIN (ISO 6166) identifies a security: two letters for the prefix, nine
alphanumerics assigned by a national numbering agency, and a check digit.
Apple's common stock is US0378331005:

    US         prefix (country of the issuer)
    037833100  body (here, Apple's CUSIP)
    5          check digit over "US037833100"

Run this:  python demo_isin.py
"""

from __future__ import annotations

from isin.core.checksum import checksum_functional, checksum_table
from isin.core.errors import IncorrectCheckDigit
from isin.core.identifier import build_from_parts, parse, parse_loose
from isin.core.result import Err, Ok
from isin.core.serialization import from_json, to_json
from isin.infra.config import ScreeningConfig
from isin.tool.screening import screen_lines


def main() -> None:
    # 1. Strict parsing returns Ok or Err; it never raises.
    match parse("US0378331005"):
        case Ok(isin):
            print(f"parsed {isin}: prefix={isin.prefix} body={isin.body} check={isin.check_digit}")
        case Err(error):
            raise SystemExit(f"unexpected: {error}")

    # 2. The first structural problem, left to right, is reported.
    for raw in ("", "us0378331005", "US09739d1000", "US037833100X", "US0378331006"):
        match parse(raw):
            case Err(IncorrectCheckDigit(was=was, expected=expected)):
                print(f"{raw!r}: check digit {was} should be {expected}")
            case Err(error):
                print(f"{raw!r}: {error!r}")
            case Ok(_):
                print(f"{raw!r}: ok")

    # 3. Loose parsing tolerates case and surrounding whitespace, nothing else.
    print("loose:", parse_loose("\t us0378331005  \n"))

    # 4. Building computes the check digit for you.
    print("built:", build_from_parts("US", "037833100"))

    # 5. The two checksum implementations agree.
    payload = b"US037833100"
    print(f"checksum: functional={checksum_functional(payload)} table={checksum_table(payload)}")

    # 6. JSON round trip.
    wire = to_json(isin)
    print(f"json: {wire} -> {from_json(wire)}")

    # 7. Bulk screening with repair.
    report = screen_lines(
        ["US0378331005", "US0378331006", "US037833100", "garbage"],
        ScreeningConfig(fix=True),
    )
    print(f"screened {report.total}: {report.valid} valid, {report.invalid} invalid, {report.fixed} fixed")
    for outcome in report.failures:
        print(f"  line {outcome.line_no}: {outcome.raw!r} fixed={outcome.fixed}")


if __name__ == "__main__":
    main()
