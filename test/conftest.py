import pytest
from pix_brcode import create_api
from pix_brcode.limiter import limiter


@pytest.fixture
def app():
    app = create_api()
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    limiter.reset()
    with app.app_context():
        with app.test_client() as client:
            yield client


@pytest.fixture
def payload_fulano():
    return (
        '000201'
        '26400014BR.GOV.BCB.PIX0118fulano@example.com'
        '52040000'
        '5303986'
        '5406150.00'
        '5802BR'
        '5913JOAO DA SILVA'
        '6009SAO PAULO'
        '62070503***'
        '6304'
    )
