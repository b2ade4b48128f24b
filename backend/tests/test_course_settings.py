def test_settings_default_empty(client):
    res = client.get('/api/course/front9/settings')
    assert res.status_code == 200
    body = res.get_json()
    assert body['courseType'] == 'front9'
    assert body['satelliteImagePath'] is None
    assert body['holeCoordinates'] == []


def test_settings_persist(client):
    payload = {
        'satelliteImagePath': '/assets/satellite-1-optimized.jpg',
        'satelliteThumbnailPath': '/assets/satellite-1-thumb.jpg',
        'holeCoordinates': [{'hole': 1, 'x': 0.25, 'y': 0.5}],
    }
    res = client.put('/api/course/full18/settings', json=payload)
    assert res.status_code == 200

    body = client.get('/api/course/full18/settings').get_json()
    assert body['satelliteImagePath'] == payload['satelliteImagePath']
    assert body['holeCoordinates'] == payload['holeCoordinates']
    # other courses are untouched
    assert client.get('/api/course/back9/settings').get_json()['satelliteImagePath'] is None

    res = client.put('/api/course/full18/settings', json={'satelliteImagePath': '/assets/new.jpg'})
    body = res.get_json()
    assert body['satelliteImagePath'] == '/assets/new.jpg'
    assert body['satelliteThumbnailPath'] is None
    assert body['holeCoordinates'] == []


def test_settings_validation(client):
    assert client.get('/api/course/mini/settings').status_code == 404
    assert client.put('/api/course/front9/settings', json={'holeCoordinates': 'nope'}).status_code == 400
    assert client.put('/api/course/front9/settings', json={'satelliteImagePath': 3}).status_code == 400
