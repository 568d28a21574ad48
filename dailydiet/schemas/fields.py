"""
Strict marshmallow fields.

marshmallow coerces "12" into 12.0 and "yes" into True; the diet API only
accepts real JSON numbers and booleans, and snack times without an offset.
"""

import re
from marshmallow import fields

_OFFSET_SUFFIX = re.compile(r"(Z|[+-]\d{2}(:?\d{2})?)$", re.IGNORECASE)


class StrictNumber(fields.Float):
    def _deserialize(self, value, attr, data, **kwargs):
        # bool is a subclass of int
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise self.make_error("invalid")
        return super()._deserialize(value, attr, data, **kwargs)


class StrictBoolean(fields.Boolean):
    def _deserialize(self, value, attr, data, **kwargs):
        if not isinstance(value, bool):
            raise self.make_error("invalid")
        return value


class NaiveTime(fields.Time):
    # TIME columns keep no offset
    def _deserialize(self, value, attr, data, **kwargs):
        if isinstance(value, str) and _OFFSET_SUFFIX.search(value.strip()):
            raise self.make_error("invalid")
        parsed = super()._deserialize(value, attr, data, **kwargs)
        if parsed.tzinfo is not None:
            raise self.make_error("invalid")
        return parsed
