"""
In-memory collaborators used by the workflows: account and transaction
services backed by a shared InMemoryBank store.
"""
