"""
Tests for api-action notifications emitted by task mutations
"""
from taskboard.events import api_action


def test_create_emits_create(client, tasks_url, auth_headers, user, emitted):
    created = client.post(tasks_url, json={'title': 'Plan'}, headers=auth_headers).get_json()['data']

    assert len(emitted) == 1
    event = emitted[0]
    assert event['action'] == 'create'
    assert event['resource_type'] == 'task'
    assert event['resource'] == created
    assert event['actor']['id'] == user.id


def test_update_and_delete_emit(client, tasks_url, auth_headers, emitted):
    created = client.post(tasks_url, json={'title': 'Plan'}, headers=auth_headers).get_json()['data']
    client.put(f"{tasks_url}/{created['id']}", json={'title': 'Plan2'}, headers=auth_headers)
    deleted = client.delete(f"{tasks_url}/{created['id']}", headers=auth_headers).get_json()['data']

    assert [event['action'] for event in emitted] == ['create', 'update', 'delete']
    assert emitted[2]['resource'] == deleted
    assert emitted[2]['resource']['title'] == 'Plan2'


def test_add_participant_emits_update(client, tasks_url, auth_headers, participant, emitted):
    created = client.post(tasks_url, json={'title': 'Plan'}, headers=auth_headers).get_json()['data']
    client.post(f"{tasks_url}/{created['id']}/participants/{participant.id}", headers=auth_headers)

    assert emitted[-1]['action'] == 'update'
    assert emitted[-1]['resource']['participants'][0]['id'] == participant.id


def test_reads_and_rejections_do_not_emit(client, tasks_url, auth_headers, emitted):
    client.get(tasks_url, headers=auth_headers)
    client.post(tasks_url, json={'title': ''}, headers=auth_headers)
    client.put(f'{tasks_url}/12345', json={'title': 'x'}, headers=auth_headers)

    assert emitted == []


def test_failing_receiver_does_not_break_request(app, client, tasks_url, auth_headers, emitted):
    def broken_receiver(sender, **kwargs):
        raise RuntimeError('websocket hub unavailable')

    api_action.connect(broken_receiver, sender=app)
    try:
        response = client.post(tasks_url, json={'title': 'Plan'}, headers=auth_headers)
    finally:
        api_action.disconnect(broken_receiver, sender=app)

    assert response.status_code == 201
    assert len(emitted) == 1
