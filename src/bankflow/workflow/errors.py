"""
Errors raised by the workflow core.

Only programming defects are raised; request problems are expressed as
Outcomes instead.
"""


class WorkflowDefect(RuntimeError):
    """
    A code defect inside an evaluator or the transport mapping, e.g. a builder
    terminated twice or an Outcome kind nobody handles. Never caught.
    """
