"""Trade Scout: upcoming trade events, strategy plans and reports for exporters.

Public API surface:
    - ScoutConfig: Runtime configuration
    - TradeScoutSession: Session owning search, analysis, venue and export slots
"""

__version__ = "1.0.0"
__author__ = "Trade Scout Contributors"

from config.settings import ScoutConfig
from tradescout.session import TradeScoutSession

__all__ = [
    "__version__",
    "ScoutConfig",
    "TradeScoutSession",
]
