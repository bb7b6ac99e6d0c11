import hashlib

import httpx

from vlogsite.services import media_service


def _fake_post(calls, response_factory):
    def fake_post(url, **kwargs):
        calls.append((url, kwargs))
        return response_factory(httpx.Request("POST", url))

    return fake_post


def test_missing_configuration_is_an_error(png_bytes):
    result = media_service.upload_image(png_bytes, filename="camp.png")

    assert not result.success
    assert result.error == "Cloudinary configuration is missing."
    assert result.image_url is None


def test_partial_configuration_is_still_disabled(monkeypatch, png_bytes, cloudinary_settings):
    monkeypatch.setattr(cloudinary_settings, "CLOUDINARY_API_SECRET", "")

    result = media_service.upload_image(png_bytes)

    assert not result.success
    assert result.error


def test_empty_upload(cloudinary_settings):
    result = media_service.upload_image(b"")
    assert result.error == "No file provided for upload."


def test_non_image_bytes_rejected(cloudinary_settings):
    result = media_service.upload_image(b"definitely not a picture", filename="notes.txt")
    assert result.error == "File is not a valid image."


def test_oversized_upload_rejected(monkeypatch, cloudinary_settings, png_bytes):
    monkeypatch.setattr(cloudinary_settings, "MAX_UPLOAD_BYTES", 10)

    result = media_service.upload_image(png_bytes)

    assert not result.success
    assert "upload limit" in result.error


def test_successful_upload_returns_secure_url(monkeypatch, cloudinary_settings, png_bytes):
    calls = []
    url = "https://res.cloudinary.com/demo/image/upload/v1/camp.png"
    monkeypatch.setattr(
        media_service.httpx,
        "post",
        _fake_post(calls, lambda req: httpx.Response(200, json={"secure_url": url}, request=req)),
    )

    result = media_service.upload_image(png_bytes, filename="camp.png", content_type="image/png")

    assert result.success
    assert result.image_url == url
    (called_url, kwargs), = calls
    assert called_url == "https://api.cloudinary.com/v1_1/demo/image/upload"
    data = kwargs["data"]
    assert data["api_key"] == "123456789"
    expected = hashlib.sha1(f"timestamp={data['timestamp']}shh".encode()).hexdigest()
    assert data["signature"] == expected
    assert kwargs["files"]["file"] == ("camp.png", png_bytes, "image/png")
    assert kwargs["timeout"] == cloudinary_settings.UPLOAD_TIMEOUT_SECONDS


def test_host_error_message_is_passed_through(monkeypatch, cloudinary_settings, png_bytes):
    body = {"error": {"message": "Invalid Signature"}}
    monkeypatch.setattr(
        media_service.httpx,
        "post",
        _fake_post([], lambda req: httpx.Response(401, json=body, request=req)),
    )

    result = media_service.upload_image(png_bytes)

    assert not result.success
    assert result.error == "Cloudinary upload failed: Invalid Signature"


def test_host_error_without_message(monkeypatch, cloudinary_settings, png_bytes):
    monkeypatch.setattr(
        media_service.httpx,
        "post",
        _fake_post([], lambda req: httpx.Response(500, text="oops", request=req)),
    )

    result = media_service.upload_image(png_bytes)

    assert result.error == "Cloudinary upload failed: Unknown Cloudinary upload error"


def test_transport_error_does_not_raise(monkeypatch, cloudinary_settings, png_bytes):
    def timeout(url, **kwargs):
        raise httpx.ConnectTimeout("timed out", request=httpx.Request("POST", url))

    monkeypatch.setattr(media_service.httpx, "post", timeout)

    result = media_service.upload_image(png_bytes)

    assert not result.success
    assert result.error == "timed out"


def test_sign_params_sorts_and_skips_unsigned():
    params = {"timestamp": 1315060510, "public_id": "sample_image", "api_key": "k", "folder": ""}
    expected = hashlib.sha1(b"public_id=sample_image&timestamp=1315060510abcd").hexdigest()
    assert media_service.sign_params(params, "abcd") == expected
