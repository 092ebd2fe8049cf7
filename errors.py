# errors.py
"""
Error taxonomy for the service layer.

- ValidationError: bad input or a forbidden lifecycle move, rejected before
  (or instead of) any store write.
- NotFoundError: an id that does not exist (or no longer exists).
- StoreError: the database call itself failed. Carries the store's message;
  never retried.
"""


class ValidationError(ValueError):
     """Input or lifecycle rule violated."""


class DuplicateBillError(ValidationError):
     """A bill already exists for this tenant and billing period."""


class NotFoundError(LookupError):
     """Referenced row does not exist."""


class StoreError(RuntimeError):
     """The entity store rejected or failed the operation."""
