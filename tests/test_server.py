import pytest
from fastapi.testclient import TestClient

from conftest import FakeImageClient, FakeTextClient
from memora_hanzi.config.settings import Settings
from memora_hanzi.server import app, get_dependencies


@pytest.fixture
def client_for(make_dependencies):
    def factory(**kwargs):
        deps = make_dependencies(**kwargs)
        app.dependency_overrides[get_dependencies] = lambda: deps
        return TestClient(app)
    yield factory
    app.dependency_overrides.clear()


def test_health(client_for):
    response = client_for().get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_ready_requires_api_key(client_for):
    client = client_for(settings=Settings(_env_file=None, gemini_api_key=None))
    assert client.get("/ready").status_code == 503


def test_process_name_returns_camel_case_record(client_for):
    text = FakeTextClient([{"pinyin": "Zhāng Wěi"}, {"keywords": ["jam", "way"]}])
    client = client_for(text_client=text)

    response = client.post("/names/process", json={"name": "张伟"})

    assert response.status_code == 200
    assert response.json() == {
        "originalName": "张伟",
        "pinyin": "Zhāng Wěi",
        "syllables": ["Zhāng", "Wěi"],
        "keywords": ["jam", "way"],
    }


def test_process_short_name_is_bad_request(client_for):
    text = FakeTextClient()
    response = client_for(text_client=text).post("/names/process", json={"name": "A"})

    assert response.status_code == 400
    assert text.calls == []


def test_missing_api_key_is_service_unavailable(client_for):
    client = client_for(settings=Settings(_env_file=None, gemini_api_key=None))

    response = client.post("/names/process", json={"name": "Zhang Wei"})

    assert response.status_code == 503
    assert "not initialized" in response.json()["detail"]


def test_generate_image(client_for):
    image = FakeImageClient(["data:image/jpeg;base64,QUJD"])
    client = client_for(image_client=image)

    response = client.post(
        "/names/image",
        json={"originalName": "张伟", "pinyin": "Zhāng Wěi", "keywords": ["jam", "bridge"]},
    )

    assert response.status_code == 200
    assert response.json()["imageUrl"] == "data:image/jpeg;base64,QUJD"
    assert "jam, bridge" in image.prompts[0]


def test_generate_image_without_keywords_is_bad_request(client_for):
    image = FakeImageClient()
    client = client_for(image_client=image)

    response = client.post("/names/image", json={"originalName": "张伟", "pinyin": "Zhāng Wěi", "keywords": []})

    assert response.status_code == 400
    assert image.prompts == []


def test_classify_authors(client_for):
    text = FakeTextClient([{"identifiedNames": ["Xiaohua Li"]}])
    client = client_for(text_client=text)

    response = client.post("/authors/classify", json={"text": "Yiming Chen, John Smith;Xiaohua Li\nA"})

    assert response.status_code == 200
    assert response.json() == [
        {"id": "Yiming Chen-0", "name": "Yiming Chen", "isPotentiallyChinese": False},
        {"id": "John Smith-1", "name": "John Smith", "isPotentiallyChinese": False},
        {"id": "Xiaohua Li-2", "name": "Xiaohua Li", "isPotentiallyChinese": True},
    ]


def test_classify_authors_without_valid_names(client_for):
    response = client_for().post("/authors/classify", json={"text": "A; B"})

    assert response.status_code == 400
    assert "No valid author names" in response.json()["detail"]


def test_classify_authors_endpoint_failure(client_for):
    text = FakeTextClient([RuntimeError("connection reset")])

    response = client_for(text_client=text).post("/authors/classify", json={"text": "Yiming Chen"})

    assert response.status_code == 502


def test_generate_image_short_name_is_bad_request(client_for):
    image = FakeImageClient()
    client = client_for(image_client=image)

    response = client.post("/names/image", json={"originalName": "A", "pinyin": "a", "keywords": ["x"]})

    assert response.status_code == 400
    assert response.json()["detail"] == "Name is too short to process."
    assert image.prompts == []
