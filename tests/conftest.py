"""Hypothesis strategies and pytest fixtures for isin.

Strategies are composable: valid ISINs are built from generated payloads,
payloads from generated prefixes and bodies.
"""

from __future__ import annotations

from hypothesis import HealthCheck, settings
from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy

from isin.core.identifier import ISIN
from isin.core.result import unwrap

# ---------------------------------------------------------------------------
# Hypothesis global settings
# ---------------------------------------------------------------------------

settings.register_profile(
    "ci",
    max_examples=1000,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.register_profile(
    "dev",
    max_examples=100,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.load_profile("dev")


UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS = "0123456789"
ALNUM = DIGITS + UPPER

# Real ISINs covering every check digit value 0-9.
KNOWN_ISINS = (
    "US09739D1000",  # Boise Cascade
    "US4581401001",  # Intel
    "US98421M1062",  # Xerox
    "US02376R1023",  # American Airlines
    "US9216591084",  # Vanda Pharmaceuticals
    "US0207721095",  # AlphaProTec
    "US71363P1066",  # Perdoceo Education
    "US5915202007",  # Methode Electronics
    "US4570301048",  # Ingles Markets
    "US8684591089",  # Supernus Pharmaceuticals
)


# ===================================================================
# PRIMITIVE STRATEGIES
# ===================================================================


def alnum_text(min_size: int = 0, max_size: int = 40) -> SearchStrategy[str]:
    """Strings over 0-9A-Z: every input the checksum engine accepts."""
    return st.text(alphabet=ALNUM, min_size=min_size, max_size=max_size)


def prefixes() -> SearchStrategy[str]:
    return st.text(alphabet=UPPER, min_size=2, max_size=2)


def bodies() -> SearchStrategy[str]:
    return st.text(alphabet=ALNUM, min_size=9, max_size=9)


@st.composite
def payloads(draw: st.DrawFn) -> str:
    """11-character prefix + body."""
    return draw(prefixes()) + draw(bodies())


# ===================================================================
# ISIN STRATEGIES
# ===================================================================


@st.composite
def isins(draw: st.DrawFn) -> ISIN:
    """Generate valid ISIN instances via build_from_payload."""
    return unwrap(ISIN.build_from_payload(draw(payloads())))


def whitespace() -> SearchStrategy[str]:
    return st.text(alphabet=" \t\r\n", max_size=3)
