import pytest

from stackgallery.extensions import db
from stackgallery.models.comment import Comment


def _add_comment(client, target_id, **comment):
    body = {'text': 'Here is my scene file', 'commentBy': 'alice'}
    body.update(comment)
    return client.post('/api/comment/addComment', json={'id': target_id, 'type': 'question', 'comment': body})


@pytest.fixture
def media_comment(client, question):
    res = _add_comment(client, question['_id'], mediaPath='/userData/alice/scene.glb',
                       mediaSize='5MB', permitDownload=False)
    assert res.status_code == 200, res.get_json()
    return res.get_json()


def test_add_comment_attaches_to_question(client, question, media_comment):
    q = client.get(f"/api/question/getQuestionById/{question['_id']}").get_json()
    assert [c['_id'] for c in q['comments']] == [media_comment['_id']]
    assert media_comment['permitDownload'] is False
    assert media_comment['commentDateTime']


def test_plain_comment_has_no_download_flag(client, question):
    res = _add_comment(client, question['_id'])
    assert res.status_code == 200
    assert 'permitDownload' not in res.get_json()


def test_add_comment_rejects_bad_target_type(client, question):
    res = client.post('/api/comment/addComment', json={
        'id': question['_id'], 'type': 'tag', 'comment': {'text': 'x', 'commentBy': 'alice'}})
    assert res.status_code == 400


def test_add_comment_as_someone_else_is_forbidden(client, question):
    res = _add_comment(client, question['_id'], commentBy='bob')
    assert res.status_code == 403


def test_author_toggle_flips_permission(client, media_comment):
    res = client.patch('/api/comment/toggleMediaPermission',
                       json={'cid': media_comment['_id'], 'username': 'alice'})
    assert res.status_code == 200
    assert res.get_json() == {'permitDownload': True}


def test_toggle_twice_restores_original(app, client, media_comment):
    for _ in range(2):
        res = client.patch('/api/comment/toggleMediaPermission',
                           json={'cid': media_comment['_id'], 'username': 'alice'})
        assert res.status_code == 200
    assert res.get_json()['permitDownload'] is False
    with app.app_context():
        assert db.session.get(Comment, int(media_comment["_id"])).permit_download is False


def test_non_author_toggle_is_rejected(client, login, media_comment):
    login('bob')
    res = client.patch('/api/comment/toggleMediaPermission',
                       json={'cid': media_comment['_id'], 'username': 'bob'})
    assert res.status_code == 403
    # claiming to be the author does not help either
    res = client.patch('/api/comment/toggleMediaPermission',
                       json={'cid': media_comment['_id'], 'username': 'alice'})
    assert res.status_code == 403


def test_toggle_requires_login(app, media_comment):
    anonymous = app.test_client()
    res = anonymous.patch('/api/comment/toggleMediaPermission',
                          json={'cid': media_comment['_id'], 'username': 'alice'})
    assert res.status_code == 401


def test_toggle_missing_comment(client, alice):
    res = client.patch('/api/comment/toggleMediaPermission', json={'cid': '9999', 'username': 'alice'})
    assert res.status_code == 404
    assert res.get_json()['error'] == 'Comment not found'


def test_toggle_comment_without_media(client, question):
    cid = _add_comment(client, question['_id']).get_json()['_id']
    res = client.patch('/api/comment/toggleMediaPermission', json={'cid': cid, 'username': 'alice'})
    assert res.status_code == 400


def test_comment_media_blocked_until_permitted(client, media_comment):
    res = client.get(f"/api/comment/getCommentMedia/{media_comment['_id']}")
    assert res.status_code == 403

    client.patch('/api/comment/toggleMediaPermission', json={'cid': media_comment['_id'], 'username': 'alice'})
    res = client.get(f"/api/comment/getCommentMedia/{media_comment['_id']}")
    assert res.status_code == 200
    body = res.get_json()
    assert body['mediaPath'] == '/userData/alice/scene.glb'
    assert body['extension'] == 'glb'
    assert body['confirmMessage'] == 'This file is 5MB. Are you sure you want to download this .glb file?'
