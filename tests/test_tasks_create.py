"""
Tests for creating and listing project tasks
"""
import pytest
from sqlalchemy.exc import OperationalError

from taskboard.repositories import TaskRepository


def test_create_task_minimal(client, tasks_url, auth_headers, user, project):
    response = client.post(tasks_url, json={'title': 'Plan'}, headers=auth_headers)
    assert response.status_code == 201

    body = response.get_json()
    assert body['success'] is True
    task = body['data']
    assert task['title'] == 'Plan'
    assert task['start'] is None
    assert task['end'] is None
    assert task['project_id'] == project.id
    assert task['creator']['id'] == user.id
    assert task['creator']['email'] == user.email
    assert task['participants'] == []


def test_create_task_trims_title_and_keeps_description(client, tasks_url, auth_headers):
    response = client.post(tasks_url, json={
        'title': '   Write report  ',
        'description': '  keep my spacing  ',
    }, headers=auth_headers)
    assert response.status_code == 201
    task = response.get_json()['data']
    assert task['title'] == 'Write report'
    assert task['description'] == '  keep my spacing  '


def test_create_task_with_dates(client, tasks_url, auth_headers):
    response = client.post(tasks_url, json={
        'title': 'Sprint',
        'start': '2024-01-01',
        'end': '2024-01-14T12:30:00Z',
    }, headers=auth_headers)
    assert response.status_code == 201
    task = response.get_json()['data']
    assert task['start'] == '2024-01-01T00:00:00'
    assert task['end'] == '2024-01-14T12:30:00'


def test_create_task_accepts_form_body(client, tasks_url, auth_headers):
    response = client.post(tasks_url, data={'title': 'From a form'}, headers=auth_headers)
    assert response.status_code == 201
    assert response.get_json()['data']['title'] == 'From a form'


def test_same_start_and_end_is_allowed(client, tasks_url, auth_headers):
    response = client.post(tasks_url, json={
        'title': 'Milestone', 'start': '2024-03-01T09:00:00', 'end': '2024-03-01T09:00:00'
    }, headers=auth_headers)
    assert response.status_code == 201


@pytest.mark.parametrize('body', [
    {},
    {'title': ''},
    {'title': '    '},
    {'title': None},
    {'title': 42},
    {'description': 'no title'},
])
def test_create_task_requires_title(client, tasks_url, auth_headers, body):
    response = client.post(tasks_url, json=body, headers=auth_headers)
    assert response.status_code == 400
    assert response.get_json()['error']['code'] == 'required_parameter_missing'


def test_title_is_checked_before_dates(client, tasks_url, auth_headers):
    response = client.post(tasks_url, json={'title': ' ', 'start': '2024-01-01'}, headers=auth_headers)
    assert response.get_json()['error']['code'] == 'required_parameter_missing'


@pytest.mark.parametrize('dates', [
    {'start': '2024-01-01'},
    {'end': '2024-01-01'},
    {'start': '2024-01-01', 'end': ''},
    {'start': None, 'end': '2024-01-01'},
])
def test_create_task_requires_both_dates_or_none(client, tasks_url, auth_headers, dates):
    response = client.post(tasks_url, json={'title': 'Plan', **dates}, headers=auth_headers)
    assert response.status_code == 400
    assert response.get_json()['error']['code'] == 'either_both_dates_or_none'


def test_create_task_rejects_end_before_start(client, tasks_url, auth_headers):
    response = client.post(tasks_url, json={
        'title': 'Backwards', 'start': '2024-01-02', 'end': '2024-01-01'
    }, headers=auth_headers)
    assert response.status_code == 400
    assert response.get_json()['error']['code'] == 'end_date_before_start'


def test_end_before_start_compares_in_utc(client, tasks_url, auth_headers):
    # 10:00+02:00 is 08:00 UTC, which is before 09:00 UTC
    response = client.post(tasks_url, json={
        'title': 'Offsets', 'start': '2024-01-01T09:00:00Z', 'end': '2024-01-01T10:00:00+02:00'
    }, headers=auth_headers)
    assert response.get_json()['error']['code'] == 'end_date_before_start'


@pytest.mark.parametrize('dates', [
    {'start': 'yesterday', 'end': '2024-01-01'},
    {'start': '2024-01-01', 'end': '2024-13-45'},
    {'start': 20240101, 'end': 20240102},
])
def test_create_task_rejects_unparseable_dates(client, tasks_url, auth_headers, dates):
    response = client.post(tasks_url, json={'title': 'Plan', **dates}, headers=auth_headers)
    assert response.status_code == 400
    assert response.get_json()['error']['code'] == 'invalid_date_format'


def test_validation_errors_do_not_persist(client, tasks_url, auth_headers):
    client.post(tasks_url, json={'title': 'Plan', 'start': '2024-01-01'}, headers=auth_headers)
    response = client.get(tasks_url, headers=auth_headers)
    assert response.get_json()['data'] == []


def test_create_task_persistence_failure(client, tasks_url, auth_headers, monkeypatch):
    def failing_add(self, task):
        raise OperationalError('INSERT INTO tasks', {}, Exception('database is locked'))

    monkeypatch.setattr(TaskRepository, 'add', failing_add)

    response = client.post(tasks_url, json={'title': 'Plan'}, headers=auth_headers)
    assert response.status_code == 500
    error = response.get_json()['error']
    assert error['code'] == 'creation_failed'
    assert 'locked' not in error['message']


def test_list_tasks_empty(client, tasks_url, auth_headers):
    response = client.get(tasks_url, headers=auth_headers)
    assert response.status_code == 200
    assert response.get_json()['data'] == []


def test_list_tasks_in_creation_order(client, tasks_url, auth_headers):
    for title in ('first', 'second', 'third'):
        client.post(tasks_url, json={'title': title}, headers=auth_headers)

    response = client.get(tasks_url, headers=auth_headers)
    assert response.status_code == 200
    assert [task['title'] for task in response.get_json()['data']] == ['first', 'second', 'third']


def test_list_tasks_only_for_path_project(client, tasks_url, auth_headers, user, make_project, make_task):
    other = make_project('Other')
    make_task(other, user, title='Elsewhere')
    client.post(tasks_url, json={'title': 'Here'}, headers=auth_headers)

    titles = [task['title'] for task in client.get(tasks_url, headers=auth_headers).get_json()['data']]
    assert titles == ['Here']


def test_list_tasks_expands_relations(client, db, tasks_url, auth_headers, user, participant, project, make_task):
    task = make_task(project, user, title='Expanded')
    task.participants.append(participant)
    db.session.commit()

    listed = client.get(tasks_url, headers=auth_headers).get_json()['data'][0]
    assert listed['creator']['full_name'] == 'Ada Lovelace'
    assert listed['participants'][0]['id'] == participant.id
    assert listed['participants'][0]['user']['id'] == user.id


def test_list_tasks_persistence_failure(client, tasks_url, auth_headers, monkeypatch):
    def failing_list(self, project_id):
        raise OperationalError('SELECT', {}, Exception('gone away'))

    monkeypatch.setattr(TaskRepository, 'list_for_project', failing_list)

    response = client.get(tasks_url, headers=auth_headers)
    assert response.status_code == 500
    assert response.get_json()['error']['code'] == 'internal_server_error'
