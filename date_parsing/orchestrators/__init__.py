from date_parsing.orchestrators.parse_orchestrator import ParseOrchestrator
from date_parsing.orchestrators.fuzzy_date_parse_orchestrator import FuzzyDateParseOrchestrator
from date_parsing.orchestrators.event_date_parse_orchestrator import EventDateParseOrchestrator

__all__ = [
    "ParseOrchestrator",
    "FuzzyDateParseOrchestrator",
    "EventDateParseOrchestrator",
]
