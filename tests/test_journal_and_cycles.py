def test_cycle_crud_and_current(client, auth_headers):
    assert client.get('/api/cycle-tracking/current', headers=auth_headers).get_json()['data'] is None

    client.post('/api/cycle-tracking', json={'period_start_date': '2025-01-05'}, headers=auth_headers)
    response = client.post('/api/cycle-tracking', json={
        'period_start_date': '2025-02-02',
        'period_end_date': '2025-02-06',
        'cycle_length': 30
    }, headers=auth_headers)
    assert response.status_code == 201

    cycles = client.get('/api/cycle-tracking', headers=auth_headers).get_json()['data']
    assert [cycle['period_start_date'] for cycle in cycles] == ['2025-02-02', '2025-01-05']
    assert cycles[1]['cycle_length'] == 28

    current = client.get('/api/cycle-tracking/current', headers=auth_headers).get_json()['data']
    assert current['period_start_date'] == '2025-02-02'
    assert current['cycle_length'] == 30


def test_cycle_end_before_start_rejected(client, auth_headers):
    response = client.post('/api/cycle-tracking', json={
        'period_start_date': '2025-02-02',
        'period_end_date': '2025-02-01'
    }, headers=auth_headers)
    assert response.status_code == 400
    assert 'period_end_date' in response.get_json()['details']


def test_cycle_patch_validates_against_stored_dates(client, auth_headers):
    created = client.post('/api/cycle-tracking', json={'period_start_date': '2025-02-02'},
                          headers=auth_headers).get_json()['data']

    bad = client.patch(f"/api/cycle-tracking/{created['id']}", json={'period_end_date': '2025-01-30'},
                       headers=auth_headers)
    assert bad.status_code == 400

    good = client.patch(f"/api/cycle-tracking/{created['id']}", json={'period_end_date': '2025-02-06'},
                        headers=auth_headers)
    assert good.status_code == 200
    assert good.get_json()['data']['period_end_date'] == '2025-02-06'


def test_cycle_of_other_user_not_found(client, auth_headers, other_auth_headers):
    created = client.post('/api/cycle-tracking', json={'period_start_date': '2025-02-02'},
                          headers=auth_headers).get_json()['data']
    response = client.patch(f"/api/cycle-tracking/{created['id']}", json={'cycle_length': 30},
                            headers=other_auth_headers)
    assert response.status_code == 404


def test_journal_entry_captures_cycle_day(client, auth_headers):
    client.post('/api/cycle-tracking', json={'period_start_date': '2025-03-01'}, headers=auth_headers)

    response = client.post('/api/journal-entries', json={
        'date': '2025-03-11',
        'mood': 'good',
        'symptoms': ['bloating', ' bloating ', '', 'headache'],
        'notes': 'Slept well'
    }, headers=auth_headers)
    entry = response.get_json()['data']

    assert response.status_code == 201
    assert entry['cycle_day'] == 11
    assert entry['symptoms'] == ['bloating', 'headache']


def test_journal_entry_without_cycle(client, auth_headers):
    entry = client.post('/api/journal-entries', json={'date': '2025-03-11', 'mood': 'okay'},
                        headers=auth_headers).get_json()['data']
    assert entry['cycle_day'] is None
    assert entry['symptoms'] == []


def test_journal_entry_before_cycle_start_has_no_cycle_day(client, auth_headers):
    client.post('/api/cycle-tracking', json={'period_start_date': '2025-03-01'}, headers=auth_headers)
    entry = client.post('/api/journal-entries', json={'date': '2025-02-20'},
                        headers=auth_headers).get_json()['data']
    assert entry['cycle_day'] is None


def test_journal_by_date(client, auth_headers):
    assert client.get('/api/journal-entries/date/2025-03-11', headers=auth_headers).get_json()['data'] is None

    client.post('/api/journal-entries', json={'date': '2025-03-11', 'mood': 'low'}, headers=auth_headers)
    found = client.get('/api/journal-entries/date/2025-03-11', headers=auth_headers).get_json()['data']
    assert found['mood'] == 'low'

    assert client.get('/api/journal-entries/date/not-a-date', headers=auth_headers).status_code == 400


def test_one_journal_entry_per_day(client, auth_headers):
    client.post('/api/journal-entries', json={'date': '2025-03-11'}, headers=auth_headers)
    response = client.post('/api/journal-entries', json={'date': '2025-03-11'}, headers=auth_headers)
    assert response.status_code == 409


def test_database_rejects_second_journal_entry_for_same_day(client, auth_headers, monkeypatch):
    from medcycle.services.journal_service import JournalService

    client.post('/api/journal-entries', json={'date': '2025-03-11'}, headers=auth_headers)

    # Skip the lookup so the insert reaches the unique constraint
    monkeypatch.setattr(JournalService, 'get_for_date', staticmethod(lambda user, day: None))
    response = client.post('/api/journal-entries', json={'date': '2025-03-11'}, headers=auth_headers)
    assert response.status_code == 409

    monkeypatch.undo()
    entries = client.get('/api/journal-entries', headers=auth_headers).get_json()['data']
    assert len(entries) == 1


def test_journal_listing_newest_first_with_limit(client, auth_headers):
    for day in ('2025-03-09', '2025-03-11', '2025-03-10'):
        client.post('/api/journal-entries', json={'date': day}, headers=auth_headers)

    entries = client.get('/api/journal-entries?limit=2', headers=auth_headers).get_json()['data']
    assert [entry['date'] for entry in entries] == ['2025-03-11', '2025-03-10']

    assert client.get('/api/journal-entries?limit=0', headers=auth_headers).status_code == 400


def test_journal_patch_and_mood_validation(client, auth_headers):
    entry = client.post('/api/journal-entries', json={'date': '2025-03-11'}, headers=auth_headers).get_json()['data']

    bad = client.patch(f"/api/journal-entries/{entry['id']}", json={'mood': 'ecstatic'}, headers=auth_headers)
    assert bad.status_code == 400

    good = client.patch(f"/api/journal-entries/{entry['id']}", json={'mood': 'great', 'notes': 'Better today'},
                        headers=auth_headers)
    assert good.status_code == 200
    assert good.get_json()['data']['mood'] == 'great'
    assert good.get_json()['data']['date'] == '2025-03-11'
