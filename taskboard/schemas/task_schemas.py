"""
Marshmallow schemas for task request bodies
"""
from marshmallow import Schema, fields, pre_load, EXCLUDE, ValidationError

from taskboard.utils.input_validators import parse_iso_datetime


class IsoDateTime(fields.Field):
    """ISO-8601 date or datetime, normalised to naive UTC."""

    default_error_messages = {
        'invalid': 'Not a valid ISO-8601 date.'
    }

    def _deserialize(self, value, attr, data, **kwargs):
        try:
            return parse_iso_datetime(value)
        except (ValueError, TypeError) as error:
            raise self.make_error('invalid') from error

    def _serialize(self, value, attr, obj, **kwargs):
        return value.isoformat() if value else None


class TaskPayloadSchema(Schema):
    """
    Body accepted by task create and update.

    Keys absent from the body stay absent from the loaded dict, so callers can
    tell an omitted description from an explicitly cleared one.
    """

    class Meta:
        unknown = EXCLUDE

    title = fields.Raw(allow_none=True)
    description = fields.Raw(allow_none=True)
    start = IsoDateTime(allow_none=True)
    end = IsoDateTime(allow_none=True)

    @pre_load
    def blank_dates_to_none(self, data, **kwargs):
        if not isinstance(data, dict):
            return data

        data = dict(data)
        for key in ('start', 'end'):
            if key in data and (data[key] is None or (isinstance(data[key], str) and not data[key].strip())):
                data[key] = None
        return data


def load_task_payload(data):
    """
    Load a raw request body into task fields.

    Returns:
        tuple: (payload dict, errors dict); errors is empty on success
    """
    if not isinstance(data, dict):
        data = {}

    try:
        return TaskPayloadSchema().load(data), {}
    except ValidationError as err:
        return err.valid_data or {}, err.messages
