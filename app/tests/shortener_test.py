import pytest

from app.core.config import settings
from app.services import metrics
from app.utils.encoding import ALPHABET, Algorithm, CodeGenerator


def test_generate_success(client):
    """Test default generation uses MD5 digest truncation."""
    url = "https://www.example.com/path/to/resource?param=value"
    response = client.post("/api/shortlink/generate", json={"url": url})
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["originalUrl"] == url
    assert data["shortLink"] == CodeGenerator().by_digest_truncation(url, Algorithm.MD5)
    assert data["shortUrl"] == f"{settings.BASE_URL}/{data['shortLink']}"
    assert data["algorithm"] == "MD5"
    assert isinstance(data["timestamp"], int)


def test_generate_is_deterministic(client):
    url = "https://example.com/idempotent"
    first = client.post("/api/shortlink/generate", json={"url": url}).json()["shortLink"]
    second = client.post("/api/shortlink/generate", json={"url": url}).json()["shortLink"]
    assert first == second


@pytest.mark.parametrize("body", [{}, {"url": ""}, {"url": "   "}, {"url": None}])
def test_generate_rejects_missing_url(client, body):
    response = client.post("/api/shortlink/generate", json=body)
    assert response.status_code == 400
    data = response.json()
    assert data["success"] is False
    assert "empty" in data["message"].lower()
    assert "timestamp" in data


def test_generate_rejects_malformed_body(client):
    response = client.post("/api/shortlink/generate", json={"url": ["not", "a", "string"]})
    assert response.status_code == 422


def test_generate_records_metric(client, mock_redis):
    client.post("/api/shortlink/generate", json={"url": "https://example.com/metric"})
    mock_redis.incrby.assert_called_once_with(metrics.GENERATED_COUNTER_KEY, 1)


def test_batch_generate(client, sample_urls, mock_redis):
    response = client.post("/api/shortlink/batch-generate", json={"urls": sample_urls})
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["count"] == len(sample_urls)
    assert [r["originalUrl"] for r in data["results"]] == sample_urls
    for result in data["results"]:
        assert len(result["shortLink"]) == 6
    mock_redis.incrby.assert_called_once_with(metrics.GENERATED_COUNTER_KEY, len(sample_urls))


@pytest.mark.parametrize("body", [{}, {"urls": []}, {"urls": ["https://example.com", ""]}])
def test_batch_generate_rejects_empty(client, body):
    response = client.post("/api/shortlink/batch-generate", json=body)
    assert response.status_code == 400
    assert response.json()["success"] is False


def test_batch_generate_rejects_oversized(client):
    urls = [f"https://example.com/{i}" for i in range(settings.MAX_BATCH_SIZE + 1)]
    response = client.post("/api/shortlink/batch-generate", json={"urls": urls})
    assert response.status_code == 400


@pytest.mark.parametrize("selector,expected", [
    ("hash", "Hash"),
    ("random", "Random"),
    ("timestamp", "Timestamp"),
    ("TIMESTAMP", "Timestamp"),
    ("md5", "MD5"),
    ("unknown", "MD5"),
    (None, "MD5"),
])
def test_generate_with_algorithm(client, selector, expected):
    response = client.post(
        "/api/shortlink/generate-with-algorithm",
        json={"url": "https://example.com/algo", "algorithm": selector},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["algorithm"] == expected
    assert len(data["shortLink"]) == 6
    assert all(ch in ALPHABET for ch in data["shortLink"])


def test_generate_with_hash_algorithm_is_checksum(client):
    url = "https://www.example.com/path"
    data = client.post("/api/shortlink/generate-with-algorithm", json={"url": url, "algorithm": "hash"}).json()
    assert data["shortLink"] == CodeGenerator().by_checksum(url)


@pytest.mark.parametrize("length,expected", [(8, 8), (10, 10), (0, 6), (-3, 6), (None, 6)])
def test_generate_custom_length(client, length, expected):
    response = client.post(
        "/api/shortlink/generate-custom-length",
        json={"url": "https://example.com/custom", "length": length},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["length"] == expected
    assert len(data["shortLink"]) == expected


def test_generate_custom_length_too_long(client):
    response = client.post(
        "/api/shortlink/generate-custom-length",
        json={"url": "https://example.com/custom", "length": settings.MAX_CODE_LENGTH + 1},
    )
    assert response.status_code == 400


def test_validate_valid_code(client):
    response = client.get("/api/shortlink/validate/aBc123")
    assert response.status_code == 200
    data = response.json()
    assert data["isValid"] is True
    assert data["shortLink"] == "aBc123"
    assert data["length"] == 6


@pytest.mark.parametrize("code", ["abc12", "abc1234", "abc-12", "abc@12", "abc%2012"])
def test_validate_invalid_code(client, code):
    response = client.get(f"/api/shortlink/validate/{code}")
    assert response.status_code == 200
    data = response.json()
    assert data["isValid"] is False
    assert "length" not in data


def test_stats(client, mock_redis):
    mock_redis.get.side_effect = lambda key: "42" if key == metrics.GENERATED_COUNTER_KEY else None
    response = client.get("/api/shortlink/stats")
    assert response.status_code == 200
    stats = response.json()["stats"]
    assert stats["totalGenerated"] == 42
    assert stats["supportedAlgorithms"] == ["MD5", "Hash", "Random", "Timestamp"]
    assert stats["defaultLength"] == 6
    assert stats["characterSetSize"] == 62
    assert stats["possibleCombinations"] == 62 ** 6


@pytest.mark.parametrize("path", ["/api/shortlink/generate", "/api/shortlink/generate-with-algorithm", "/api/shortlink/generate-custom-length"])
def test_generate_rejects_lone_surrogate(client, path):
    response = client.post(path, content=b'{"url": "https://x/\\ud800"}', headers={"Content-Type": "application/json"})
    assert response.status_code == 400
    assert response.json()["success"] is False


def test_batch_generate_rejects_lone_surrogate(client):
    response = client.post(
        "/api/shortlink/batch-generate",
        content=b'{"urls": ["https://example.com", "https://x/\\ud800"]}',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
