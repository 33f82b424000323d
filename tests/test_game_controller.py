from greek_wordle.config.game_settings import DELETE_KEY, ENTER_KEY, GREEK_ALPHABET, MAX_GUESSES


def new_game(client):
    response = client.post('/api/new_game')
    assert response.status_code == 200
    return response.get_json()


def press(client, game_id, key):
    return client.post(f'/api/game/{game_id}/key', json={'key': key})


def test_new_game(client):
    data = new_game(client)

    assert data['success'] is True
    assert data['game_id']
    assert data['state']['answer'] is None
    assert data['state']['current_row'] == 0


def test_get_state(client):
    game_id = new_game(client)['game_id']
    response = client.get(f'/api/game/{game_id}/state')

    assert response.status_code == 200
    assert response.get_json()['state']['game_id'] == game_id


def test_unknown_game_is_404(client):
    response = client.get('/api/game/missing/state')

    assert response.status_code == 404
    assert response.get_json() == {'success': False, 'error': 'Game not found'}


def test_key_presses(client):
    game_id = new_game(client)['game_id']
    press(client, game_id, 'Λ')
    press(client, game_id, 'Ο')
    response = press(client, game_id, DELETE_KEY)

    data = response.get_json()
    assert response.status_code == 200
    assert data['action'] == 'delete'
    assert data['accepted'] is True
    assert data['state']['current_guess'] == 'Λ'


def test_ignored_key_is_not_an_error(client):
    game_id = new_game(client)['game_id']
    response = press(client, game_id, '1')

    assert response.status_code == 200
    assert response.get_json()['accepted'] is False


def test_short_submit_is_400_with_shake(client):
    game_id = new_game(client)['game_id']
    press(client, game_id, 'Λ')
    response = press(client, game_id, ENTER_KEY)

    data = response.get_json()
    assert response.status_code == 400
    assert data['success'] is False
    assert data['shake'] is True
    assert data['state']['current_guess'] == 'Λ'


def test_key_requires_body(client):
    game_id = new_game(client)['game_id']
    response = client.post(f'/api/game/{game_id}/key', json={})

    assert response.status_code == 400
    assert response.get_json()['error'] == 'Key is required'


def test_winning_with_keys(client):
    game_id = new_game(client)['game_id']
    for key in 'ΚΑΛΟΣ':
        press(client, game_id, key)
    response = press(client, game_id, ENTER_KEY)

    data = response.get_json()
    assert response.status_code == 200
    assert [tile['status'] for tile in data['tiles']] == ['correct'] * 5
    assert data['state']['won'] is True
    assert data['state']['answer'] == 'ΚΑΛΟΣ'


def test_guess_endpoint(client):
    game_id = new_game(client)['game_id']
    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'ΛΟΓΟΣ'})

    data = response.get_json()
    assert response.status_code == 200
    assert [tile['status'] for tile in data['tiles']] == ['present', 'absent', 'absent', 'correct', 'correct']
    assert data['state']['current_row'] == 1
    assert data['state']['letter_status']['Σ'] == 'correct'


def test_guess_validation(client):
    game_id = new_game(client)['game_id']

    assert client.post(f'/api/game/{game_id}/guess', json={}).status_code == 400

    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'ΛΟΓ'})
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Guess must be exactly 5 letters'


def test_losing_game(client):
    game_id = new_game(client)['game_id']
    for _ in range(MAX_GUESSES):
        response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'ΠΟΛΗΣ'})

    state = response.get_json()['state']
    assert state['game_over'] is True
    assert state['won'] is False
    assert state['answer'] == 'ΚΑΛΟΣ'

    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'ΚΑΛΟΣ'})
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Game is already over'


def test_delete_game(client):
    game_id = new_game(client)['game_id']

    assert client.delete(f'/api/game/{game_id}').get_json() == {'success': True}
    assert client.delete(f'/api/game/{game_id}').status_code == 404


def test_keyboard(client):
    data = client.get('/api/keyboard').get_json()

    assert data['alphabet'] == GREEK_ALPHABET
    assert data['layout'][2][0] == ENTER_KEY
    assert data['layout'][2][-1] == DELETE_KEY
    assert data['word_length'] == 5


def test_health(client):
    new_game(client)
    data = client.get('/api/health').get_json()

    assert data['status'] == 'healthy'
    assert data['active_games'] == 1


def test_key_body_must_be_an_object(client):
    game_id = new_game(client)['game_id']
    response = client.post(f'/api/game/{game_id}/key', json=['Α'])

    assert response.status_code == 400
    assert response.get_json()['error'] == 'Key is required'


def test_guess_body_must_be_an_object(client):
    game_id = new_game(client)['game_id']
    response = client.post(f'/api/game/{game_id}/guess', json=['ΛΟΓΟΣ'])

    assert response.status_code == 400
    assert response.get_json()['error'] == 'Guess is required'


def test_key_for_game_removed_mid_request(client, game_service, monkeypatch):
    game_id = new_game(client)['game_id']
    monkeypatch.setattr(game_service, 'press_key', lambda *args: None)

    response = press(client, game_id, 'Α')
    assert response.status_code == 404
    assert response.get_json()['error'] == 'Game not found'
