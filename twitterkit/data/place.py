from .base import DataView


class BoundingBox(DataView):
    @property
    def coordinates(self):
        return self._get('coordinates')

    @property
    def type(self):
        return self._get('type')

    def __str__(self):
        return str(self.coordinates)


class Place(DataView):
    @property
    def id(self):
        return self._get('id')

    @property
    def place_type(self):
        return self._get('place_type')

    @property
    def name(self):
        return self._get('name')

    @property
    def full_name(self):
        return self._get('full_name')

    @property
    def country_code(self):
        return self._get('country_code')

    @property
    def country(self):
        return self._get('country')

    @property
    def bounding_box(self):
        return self._wrap('bounding_box', BoundingBox)

    def __str__(self):
        return str(self.full_name)
