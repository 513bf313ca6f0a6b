"""
bankflow/workflow

Decision core shared by every banking operation:
- outcome.py: Outcome variants and the one-shot OutcomeBuilder
- trail.py: ordered, append-only DecisionTrail
- amounts.py: monetary amount normalization and bounds checks
- accounts.py / transactions.py: the workflow evaluators
"""

from .amounts import AmountRejection, AmountValidationResult, AmountValidator  # noqa: F401
from .errors import WorkflowDefect  # noqa: F401
from .outcome import Outcome, OutcomeBuilder, OutcomeKind  # noqa: F401
from .trail import DecisionTrail  # noqa: F401
