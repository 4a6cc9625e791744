"""Database models."""

from sqlalchemy import MetaData

from fitness_server.models import activity as _activity
from fitness_server.models import admins as _admins
from fitness_server.models import complaints as _complaints
from fitness_server.models import exercises as _exercises
from fitness_server.models import favourites as _favourites
from fitness_server.models import ratings as _ratings
from fitness_server.models import users as _users
from fitness_server.models.activity import current_steps, daily_targets
from fitness_server.models.admins import admins
from fitness_server.models.complaints import complaints
from fitness_server.models.exercises import exercises
from fitness_server.models.favourites import favourites
from fitness_server.models.ratings import ratings
from fitness_server.models.users import users

# Combined metadata for create_all and migrations
metadata = MetaData()
for _module in (_users, _activity, _favourites, _exercises, _complaints, _admins, _ratings):
    for _table in _module.metadata.tables.values():
        _table.to_metadata(metadata)

__all__ = [
    "admins",
    "complaints",
    "current_steps",
    "daily_targets",
    "exercises",
    "favourites",
    "metadata",
    "ratings",
    "users",
]
