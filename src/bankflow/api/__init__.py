"""
HTTP layer: routers for the account and transaction endpoints and the
Outcome-to-response mapping they share.
"""
