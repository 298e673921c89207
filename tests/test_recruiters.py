import pytest
from sqlalchemy.exc import IntegrityError

from stackgallery.extensions import db
from stackgallery.models.user import User, Recruiter


@pytest.fixture
def recruiters(signup):
    signup('alice')
    signup('bob')
    signup('rita', company='Pixar')
    signup('rex', company='Weta')


def test_recruiter_signup(client, signup):
    rita = signup('rita', company='Pixar')
    assert rita['role'] == 'Recruiter'
    assert rita['company'] == 'Pixar'
    assert rita['jobPostings'] == []


def test_recruiter_needs_company(client):
    for company in (None, '', '   '):
        body = {'username': 'rita', 'password': 'secret123'}
        if company is not None:
            body['company'] = company
        res = client.post('/api/recruiter/signup', json=body)
        assert res.status_code == 400
        assert res.get_json()['error'] == 'Company is required for recruiters'


def test_role_filter_yields_exactly_the_users_with_a_company(app, client, recruiters):
    listed = client.get('/api/recruiter/getRecruiters').get_json()
    assert sorted(r['username'] for r in listed) == ['rex', 'rita']

    with app.app_context():
        by_role = User.query.filter(User.role == 'Recruiter').all()
        assert all(isinstance(u, Recruiter) and u.company for u in by_role)
        with_company = [u for u in User.query.all() if getattr(u, 'company', None)]
        assert {u.username for u in by_role} == {u.username for u in with_company}
        assert {u.role for u in User.query.filter(User.username.in_(['alice', 'bob']))} == {'User'}


def test_model_rejects_recruiter_without_company(app):
    with app.app_context():
        with pytest.raises(ValueError):
            Recruiter(username='ghost', company='')

        db.session.add(Recruiter(username='ghost', password_hash='x'))
        with pytest.raises(IntegrityError):
            db.session.commit()
        db.session.rollback()


def test_jobs(client, login, recruiters):
    login('rita')
    res = client.post('/api/recruiter/jobs', json={'title': 'Character rigger', 'description': 'Remote'})
    assert res.status_code == 200
    job = res.get_json()
    assert job['recruiter'] == 'rita'

    jobs = client.get('/api/recruiter/rita/jobs').get_json()
    assert [j['title'] for j in jobs] == ['Character rigger']
    assert client.get('/api/user/getUser/rita').get_json()['jobPostings'] == [job['_id']]

    assert client.post('/api/recruiter/jobs', json={}).status_code == 400


def test_only_recruiters_post_jobs(app, client, login, recruiters):
    assert app.test_client().post('/api/recruiter/jobs', json={'title': 'x'}).status_code == 401
    login('alice')
    assert client.post('/api/recruiter/jobs', json={'title': 'x'}).status_code == 403
    assert client.get('/api/recruiter/alice/jobs').status_code == 404
