"""ORM Models — SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)
    - One row per session; the full session lives in the JSON `data` column
"""

from deliberate.models.session_record import SessionRecord  # noqa: F401
