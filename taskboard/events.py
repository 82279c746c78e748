"""
API action notifications.

Handlers announce every mutation as (action, resource_type, resource, actor)
on the ``api-action`` signal. Receivers (websocket fan-out, audit trails) are
connected by the application; delivery is fire-and-forget, so a failing
receiver is logged and never changes the HTTP response.
"""
from blinker import Namespace
from flask import current_app

_signals = Namespace()

api_action = _signals.signal('api-action')


def emit_api_action(action, resource_type, resource, actor):
    """
    Send an API action to every connected receiver.

    Args:
        action: 'create', 'update' or 'delete'
        resource_type: Resource kind, e.g. 'task'
        resource: Serialized resource as returned to the client
        actor: Serialized user who performed the action
    """
    app = current_app._get_current_object()
    for receiver in api_action.receivers_for(app):
        try:
            receiver(app, action=action, resource_type=resource_type, resource=resource, actor=actor)
        except Exception as e:
            app.logger.warning(
                f"Failed to deliver {action} {resource_type} notification to {getattr(receiver, '__name__', receiver)}: {str(e)}",
                exc_info=True
            )


def log_api_action(sender, action, resource_type, resource, actor):
    """Default receiver: record each action in the application log."""
    sender.logger.info(
        f"API action: {action} {resource_type}:{resource.get('id')} by user {actor.get('id')}"
    )


def init_event_listeners(app):
    """Connect the default receivers for this application."""
    api_action.connect(log_api_action, sender=app, weak=False)
