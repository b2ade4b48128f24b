def _register(client, username='hank', password='secret'):
    return client.post('/api/auth/register', json={'username': username, 'password': password})


def test_register_login_logout(client):
    res = _register(client)
    assert res.status_code == 201
    assert res.get_json()['user']['username'] == 'hank'
    assert _register(client).status_code == 400

    assert client.get('/api/auth/user').get_json()['username'] == 'hank'
    assert client.post('/api/auth/logout').status_code == 200
    assert client.get('/api/auth/user').status_code == 401

    assert client.post('/api/auth/login', json={'username': 'hank', 'password': 'nope'}).status_code == 401
    assert client.post('/api/auth/login', json={'username': 'hank', 'password': 'secret'}).status_code == 200


def test_logged_in_host_needs_no_player_id(client):
    _register(client)
    game = client.post('/api/games', json={'hostName': 'Hank', 'courseType': 'front9'}).get_json()
    assert game['players'][0]['userId'] is not None

    res = client.patch(f"/api/games/{game['id']}/start")
    assert res.status_code == 200


def test_my_games(client):
    _register(client)
    mine = client.post('/api/games', json={'hostName': 'Hank', 'courseType': 'front9'}).get_json()
    client.post('/api/auth/logout')
    client.post('/api/games', json={'hostName': 'Stranger', 'courseType': 'back9'})

    client.post('/api/auth/login', json={'username': 'hank', 'password': 'secret'})
    games = client.get('/api/auth/games').get_json()
    assert [g['id'] for g in games] == [mine['id']]
    assert client.get('/api/auth/games/completed').get_json() == []


def test_my_games_requires_login(client):
    assert client.get('/api/auth/games').status_code == 401
