"""Database base class and model imports."""
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Import all models here so metadata.create_all sees them
from showcase.db.models.user import User  # noqa: F401, E402
from showcase.db.models.bootcamp import Bootcamp  # noqa: F401, E402
from showcase.db.models.project import Project  # noqa: F401, E402
from showcase.db.models.vote import Vote  # noqa: F401, E402
