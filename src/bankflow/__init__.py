"""
bankflow

Small banking API:
- workflow/: outcome model, decision trails, amount validation and the
  lookup / create / transfer / withdraw / deposit evaluators
- services/: in-memory account and transaction collaborators
- api/: FastAPI routers translating Outcomes into HTTP responses
"""

__version__ = "1.0.0"
