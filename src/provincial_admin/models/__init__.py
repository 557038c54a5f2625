"""ORM model registry: import all models so Alembic autogenerate discovers them."""

from provincial_admin.models.base import Base
from provincial_admin.models.joint_circular import JointCircular
from provincial_admin.models.provincial_official import OFFICIAL_POSITIONS, OfficialPosition, ProvincialOfficial

__all__ = [
    "OFFICIAL_POSITIONS",
    "Base",
    "JointCircular",
    "OfficialPosition",
    "ProvincialOfficial",
]
