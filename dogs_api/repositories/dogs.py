from dogs_api.models.db import Dog
from dogs_api.repositories.base import Repository


class DogRepository(Repository[Dog]):
    pass
