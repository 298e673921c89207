import io

import pytest

from stackgallery.models.user import User


def test_signup_and_duplicate(client, signup):
    user = signup('carol')
    assert user['username'] == 'carol'
    assert user['role'] == 'User'
    assert user['externalLinks'] == {'github': '', 'artstation': '', 'linkedin': '', 'website': ''}
    res = client.post('/api/user/signup', json={'username': 'carol', 'password': 'x'})
    assert res.status_code == 400
    assert res.get_json()['error'] == 'Username already exists'


def test_signup_requires_password(client):
    res = client.post('/api/user/signup', json={'username': 'carol'})
    assert res.status_code == 400
    assert res.get_json()['error'] == 'Password is required'


def test_login_rejects_bad_password(client, signup):
    signup('carol')
    res = client.post('/api/user/login', json={'username': 'carol', 'password': 'wrong'})
    assert res.status_code == 401


def test_logout_redirects_to_frontend(app, client, alice):
    res = client.post('/api/user/logout')
    assert res.status_code == 302
    assert res.headers['Location'] == app.config['FRONTEND_URL']
    assert client.get('/api/user/me').status_code == 401


def test_me(client, alice):
    assert client.get('/api/user/me').get_json()['username'] == 'alice'


def test_username_is_immutable(app, alice):
    with app.app_context():
        user = User.query.filter_by(username='alice').first()
        with pytest.raises(ValueError):
            user.username = 'mallory'


def test_profile_updates(client, alice):
    res = client.patch('/api/user/updateBiography', json={'username': 'alice', 'biography': 'I sculpt dragons'})
    assert res.get_json()['biography'] == 'I sculpt dragons'

    res = client.patch('/api/user/updateSkills', json={'username': 'alice', 'skills': ['Blender', 'Three.js']})
    assert res.get_json()['skills'] == ['Blender', 'Three.js']
    assert client.patch('/api/user/updateSkills', json={'username': 'alice', 'skills': 'Blender'}).status_code == 400

    res = client.patch('/api/user/updateCustomFont', json={'username': 'alice', 'customFont': 'Inter'})
    assert res.get_json()['customFont'] == 'Inter'

    fetched = client.get('/api/user/getUser/alice').get_json()
    assert fetched['biography'] == 'I sculpt dragons'
    assert fetched['customFont'] == 'Inter'


def test_cannot_edit_someone_elses_profile(client, alice):
    res = client.patch('/api/user/updateBiography', json={'username': 'bob', 'biography': 'hacked'})
    assert res.status_code == 403
    assert client.get('/api/user/getUser/bob').get_json()['biography'] == ''


def test_external_links_and_colors_keys_are_closed(client, alice):
    res = client.patch('/api/user/updateExternalLinks',
                       json={'username': 'alice', 'externalLinks': {'github': 'https://github.com/alice'}})
    assert res.status_code == 200
    links = res.get_json()['externalLinks']
    assert links['github'] == 'https://github.com/alice'
    assert links['website'] == ''

    res = client.patch('/api/user/updateExternalLinks',
                       json={'username': 'alice', 'externalLinks': {'myspace': 'x'}})
    assert res.status_code == 400

    res = client.patch('/api/user/updateCustomColors',
                       json={'username': 'alice', 'customColors': {'primary': '#112233'}})
    assert res.get_json()['customColors']['primary'] == '#112233'


def test_upload_profile_picture_is_stored_inline(client, alice):
    res = client.post('/api/user/uploadProfilePicture', data={
        'file': (io.BytesIO(b'abc'), 'me.png'), 'username': 'alice'}, content_type='multipart/form-data')
    assert res.status_code == 200
    assert res.get_json()['profilePicture'] == 'data:image/png;base64,YWJj'


def test_upload_errors(client, alice):
    res = client.post('/api/user/uploadBannerImage', data={'username': 'alice'},
                      content_type='multipart/form-data')
    assert res.status_code == 400
    assert res.get_json()['error'] == 'File missing'

    res = client.post('/api/user/uploadResume', data={'file': (io.BytesIO(b'%PDF'), 'cv.pdf')},
                      content_type='multipart/form-data')
    assert res.status_code == 400
    assert res.get_json()['error'] == 'Username missing'


def test_portfolio_model_needs_thumbnail(client, alice):
    res = client.post('/api/user/uploadPortfolioModel', data={
        'file': (io.BytesIO(b'glTF'), 'fox.glb'), 'username': 'alice'}, content_type='multipart/form-data')
    assert res.status_code == 400
    assert res.get_json()['error'] == 'Thumbnail required for 3D models'

    res = client.post('/api/user/uploadPortfolioModel', data={
        'file': (io.BytesIO(b'glTF'), 'fox.glb'), 'username': 'alice', 'thumbnail': 'data:image/png;base64,AA=='},
        content_type='multipart/form-data')
    assert res.status_code == 200
    user = res.get_json()
    assert len(user['portfolioModels']) == 1
    assert user['portfolioModels'][0].startswith('data:')
    assert user['portfolioThumbnails'] == ['data:image/png;base64,AA==']


def test_portfolio_from_url_and_delete(client, alice):
    for url in ('https://sketchfab.com/models/a', 'https://sketchfab.com/models/b'):
        res = client.post('/api/user/uploadPortfolioModel', json={'username': 'alice', 'mediaUrl': url})
        assert res.status_code == 200
    user = res.get_json()
    assert user['portfolioModels'] == ['https://sketchfab.com/models/a', 'https://sketchfab.com/models/b']
    assert user['portfolioThumbnails'] == ['', '']

    res = client.delete('/api/user/deletePortfolioItems', json={'username': 'alice', 'indices': [0]})
    assert res.get_json()['portfolioModels'] == ['https://sketchfab.com/models/b']
    assert res.get_json()['portfolioThumbnails'] == ['']

    res = client.post('/api/user/uploadPortfolioModel', json={'username': 'alice'})
    assert res.status_code == 400


def test_testimonial_flow(client, login, alice):
    login('bob')
    res = client.post('/api/user/testimonial',
                      json={'profileUsername': 'alice', 'fromUsername': 'bob', 'content': 'Great rigger'})
    assert res.status_code == 200
    [t] = res.get_json()['testimonials']
    assert t['fromUsername'] == 'bob'
    assert t['approved'] is False

    login('alice')
    res = client.patch('/api/user/testimonial/approve',
                       json={'username': 'alice', 'testimonialId': t['_id'], 'approved': True})
    assert res.get_json()['testimonials'][0]['approved'] is True

    # a rewrite needs approval again
    login('bob')
    res = client.post('/api/user/testimonial',
                      json={'profileUsername': 'alice', 'fromUsername': 'bob', 'content': 'Even better now'})
    [t] = res.get_json()['testimonials']
    assert t['content'] == 'Even better now'
    assert t['approved'] is False

    login('alice')
    res = client.patch('/api/user/testimonial/approve',
                       json={'username': 'alice', 'testimonialId': t['_id'], 'approved': False})
    assert res.get_json()['testimonials'] == []


def test_testimonial_errors(client, login, alice):
    res = client.post('/api/user/testimonial',
                      json={'profileUsername': 'alice', 'fromUsername': 'alice', 'content': 'I am great'})
    assert res.status_code == 400
    assert res.get_json()['error'] == 'Cannot write testimonial for yourself'

    res = client.post('/api/user/testimonial',
                      json={'profileUsername': 'nobody', 'fromUsername': 'alice', 'content': 'hi'})
    assert res.status_code == 404

    res = client.patch('/api/user/testimonial/approve',
                       json={'username': 'alice', 'testimonialId': '9999', 'approved': True})
    assert res.status_code == 404


def test_delete_own_testimonial(client, login, alice):
    login('bob')
    client.post('/api/user/testimonial',
                json={'profileUsername': 'alice', 'fromUsername': 'bob', 'content': 'Great rigger'})
    res = client.delete('/api/user/testimonial/alice', json={'fromUsername': 'bob'})
    assert res.status_code == 200
    assert res.get_json()['testimonials'] == []


def test_reset_password_and_delete_user(client, login, alice):
    res = client.patch('/api/user/resetPassword', json={'username': 'alice', 'password': 'n3w-pass'})
    assert res.status_code == 200
    login('alice', 'n3w-pass')

    assert client.delete('/api/user/deleteUser/bob').status_code == 403
    res = client.delete('/api/user/deleteUser/alice')
    assert res.status_code == 200
    assert client.get('/api/user/getUser/alice').status_code == 404
    assert [u['username'] for u in client.get('/api/user/getUsers').get_json()] == ['bob']


def test_numeric_username_in_json_is_read_as_text(client):
    res = client.post('/api/user/signup', json={'username': 12345, 'password': 'secret123'})
    assert res.status_code == 200
    assert res.get_json()['username'] == '12345'
