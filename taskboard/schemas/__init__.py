from taskboard.schemas.task_schemas import TaskPayloadSchema, IsoDateTime, load_task_payload

__all__ = ['TaskPayloadSchema', 'IsoDateTime', 'load_task_payload']
