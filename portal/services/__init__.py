from portal.services.registration_client import (
    ConnectionReport, RegistrationServiceClient, REGISTRATIONS_PATH,
)
from portal.services.aggregation import (
    compute_total_fees, format_currency, format_fee_cell, format_players,
    format_registrations_text,
)

__all__ = [
    # client
    "ConnectionReport", "RegistrationServiceClient", "REGISTRATIONS_PATH",
    # aggregation
    "compute_total_fees", "format_currency", "format_fee_cell", "format_players",
    "format_registrations_text",
]
