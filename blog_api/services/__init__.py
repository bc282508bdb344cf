# Services package.
#
# Each module encapsulates the business logic for one part of the
# Article aggregate:
#
#   article_service  — create / read / update / cascade-delete for Article
#   comment_service  — append-only comments, parent existence checked first
#   projections      — pure mapping from ORM rows to response models
#
# Services are classes constructed with a ``BlogRepository``.  Each write
# runs inside ``repository.transaction()`` and is committed before the
# service method returns, so commit failures reach the exception handlers.
