"""SIP (systematic investment plan) projection engine and HTTP API."""

__version__ = "0.1.0"

from sip_backend.core.sip import (  # noqa: E402
    InvalidArgument,
    calculate,
    calculate_required_sip,
    calculate_step_up_sip,
    get_year_wise_breakup,
)

__all__ = [
    "InvalidArgument",
    "calculate",
    "calculate_required_sip",
    "calculate_step_up_sip",
    "get_year_wise_breakup",
]
