def _register(client, username, password):
    return client.post('/api/register', json={'username': username, 'password': password})


def _login(client, username, password):
    return client.post('/api/login', json={'username': username, 'password': password})


def test_register_and_login_scenario(client):
    rv = _register(client, 'alice', 'p1')
    assert rv.status_code == 200
    assert rv.get_json() == {'message': '注册成功', 'user': {'username': 'alice', 'role': 'user'}}

    rv = _login(client, 'alice', 'p1')
    assert rv.status_code == 200
    assert rv.get_json() == {'message': '登录成功', 'user': {'username': 'alice', 'role': 'user'}}

    rv = _login(client, 'alice', 'wrong')
    assert rv.status_code == 401
    assert rv.get_json()['error'] == '账号或密码错误'


def test_seeded_admin_logs_in_with_default_credentials(client):
    rv = _login(client, 'admin', '123')
    assert rv.status_code == 200
    assert rv.get_json()['user'] == {'username': 'admin', 'role': 'admin'}


def test_register_ignores_requested_role(client):
    rv = client.post('/api/register', json={'username': 'mallory', 'password': 'x', 'role': 'admin'})
    assert rv.get_json()['user']['role'] == 'user'
    assert _login(client, 'mallory', 'x').get_json()['user']['role'] == 'user'


def test_register_duplicate_username_is_distinct_error(client):
    assert _register(client, 'bob', 'pw').status_code == 200
    rv = _register(client, 'bob', 'other')
    assert rv.status_code == 400
    assert rv.get_json()['error'] == '该用户名已被注册'


def test_register_requires_username_and_password(client):
    for body in ({}, {'username': 'x'}, {'password': 'y'}, {'username': '', 'password': 'y'}):
        rv = client.post('/api/register', json=body)
        assert rv.status_code == 400
        assert rv.get_json()['error'] == '用户名和密码不能为空'


def test_login_without_body_is_401(client):
    rv = client.post('/api/login', data='not json', content_type='text/plain')
    assert rv.status_code == 401


def test_usernames_are_case_sensitive(client):
    _register(client, 'Carol', 'pw')
    assert _register(client, 'carol', 'pw').status_code == 200
    assert _login(client, 'CAROL', 'pw').status_code == 401


def test_list_users_hides_passwords_newest_first(client):
    _register(client, 'u1', 'pw')
    _register(client, 'u2', 'pw')
    rows = client.get('/api/users').get_json()
    assert [r['username'] for r in rows] == ['u2', 'u1', 'admin']
    for r in rows:
        assert set(r) == {'id', 'username', 'role'}
    assert rows[-1]['role'] == 'admin'


def test_change_password(client):
    _register(client, 'dave', 'old')
    rv = client.post('/api/change-password', json={'username': 'dave', 'oldPassword': 'old', 'newPassword': 'new'})
    assert rv.status_code == 200
    assert rv.get_json() == {'message': '密码修改成功'}
    assert _login(client, 'dave', 'new').status_code == 200
    assert _login(client, 'dave', 'old').status_code == 401


def test_change_password_with_wrong_old_password_changes_nothing(client):
    _register(client, 'erin', 'keep')
    rv = client.post('/api/change-password', json={'username': 'erin', 'oldPassword': 'nope', 'newPassword': 'new'})
    assert rv.status_code == 401
    assert rv.get_json()['error'] == '旧密码不正确'
    assert _login(client, 'erin', 'keep').status_code == 200
    assert _login(client, 'erin', 'new').status_code == 401


def test_ids_of_deleted_users_are_not_reused(app, client):
    from sqlalchemy import delete, select  # type: ignore
    from catalog.extensions import db
    from catalog.models import User

    _register(client, 'gone', 'pw')
    with app.app_context():
        gone_id = db.session.execute(select(User.id).where(User.username == 'gone')).scalar_one()
        db.session.execute(delete(User).where(User.id == gone_id))
        db.session.commit()

    _register(client, 'next', 'pw')
    with app.app_context():
        next_id = db.session.execute(select(User.id).where(User.username == 'next')).scalar_one()
    assert next_id > gone_id
