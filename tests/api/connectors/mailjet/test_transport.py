"""Testes para api.connectors.mailjet (transporte + interpretação de resposta).

Usa httpx.MockTransport: nenhuma chamada de rede real.
"""

from __future__ import annotations

import base64
import json
from typing import Any

import httpx
import pytest

from api.connectors.mailjet import (
    DEFAULT_HOST,
    MailjetApiTransport,
    MailjetTransportError,
    SentMessage,
    interpret_response,
)
from api.validators.mailjet import ValidationError
from app.domain.email import Address, Email, Envelope

USER = "u$er"
PASSWORD = "pa$s"

SUCCESS_BODY: dict[str, Any] = {
    "Messages": [
        {
            "Status": "success",
            "To": [
                {
                    "Email": "passenger1@mailjet.com",
                    "MessageUUID": "7c5f9f29-42ba-4959-b19c-dcd8b2f327ca",
                    "MessageID": "576460756513665525",
                    "MessageHref": "https://api.mailjet.com/v3/message/576460756513665525",
                }
            ],
        }
    ]
}

BAD_REQUEST_BODY: dict[str, Any] = {
    "Messages": [
        {
            "Errors": [
                {
                    "ErrorIdentifier": "8e28ac9c-1fd7-41ad-825f-1d60bc459189",
                    "ErrorCode": "mj-0005",
                    "StatusCode": 400,
                    "ErrorMessage": "The To is mandatory but missing from the input",
                    "ErrorRelatedTo": ["To"],
                }
            ],
            "Status": "error",
        }
    ]
}


class RecordingHandler:
    """Handler do MockTransport que registra requisições."""

    def __init__(self, status_code: int = 200, content: bytes | str = b"") -> None:
        self.status_code = status_code
        self.content = content.encode() if isinstance(content, str) else content
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, content=self.content)


def _transport(handler: Any, **kwargs: Any) -> MailjetApiTransport:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return MailjetApiTransport(USER, PASSWORD, client, **kwargs)


@pytest.fixture
def email() -> Email:
    return Email(sender="foo@example.com", to=["bar@example.com"], text_body="foobar")


class TestTransportDescription:
    """Testes de __str__ e host."""

    @pytest.mark.parametrize(
        ("transport", "expected"),
        [
            (MailjetApiTransport(USER, PASSWORD), "mailjet+api://api.mailjet.com"),
            (
                MailjetApiTransport(USER, PASSWORD).set_host("example.com"),
                "mailjet+api://example.com",
            ),
            (
                MailjetApiTransport(USER, PASSWORD, sandbox=True),
                "mailjet+api://api.mailjet.com?sandbox=true",
            ),
            (
                MailjetApiTransport(USER, PASSWORD, sandbox=True).set_host("example.com"),
                "mailjet+api://example.com?sandbox=true",
            ),
        ],
    )
    def test_to_string(self, transport: MailjetApiTransport, expected: str) -> None:
        assert str(transport) == expected
        transport.close()

    def test_set_host_none_restores_default(self) -> None:
        transport = MailjetApiTransport(USER, PASSWORD, host="example.com")
        assert transport.set_host(None).host == DEFAULT_HOST
        assert transport.endpoint == "https://api.mailjet.com/v3.1/send"
        transport.close()


class TestSendSuccess:
    """Testes do caminho de sucesso."""

    def test_send_returns_message_id(self, email: Email) -> None:
        handler = RecordingHandler(content=json.dumps(SUCCESS_BODY))
        sent = _transport(handler).send(email)

        assert isinstance(sent, SentMessage)
        assert sent.message_id == "576460756513665525"
        assert sent.original_message is email
        assert sent.envelope.sender.email == "foo@example.com"
        assert sent.response is not None and sent.response.status_code == 200

    def test_send_issues_single_authenticated_post(self, email: Email) -> None:
        """Uma única requisição POST com basic auth e JSON."""
        handler = RecordingHandler(content=json.dumps(SUCCESS_BODY))
        _transport(handler, sandbox=True, host="example.com").send(email)

        assert len(handler.requests) == 1
        request = handler.requests[0]
        assert request.method == "POST"
        assert str(request.url) == "https://example.com/v3.1/send"
        assert request.headers["Accept"] == "application/json"
        expected_auth = base64.b64encode(f"{USER}:{PASSWORD}".encode()).decode()
        assert request.headers["Authorization"] == f"Basic {expected_auth}"

        body = json.loads(request.content)
        assert body["SandBoxMode"] is True
        assert body["Messages"][0]["To"] == [{"Email": "bar@example.com", "Name": ""}]
        assert body["Messages"][0]["TextPart"] == "foobar"

    def test_numeric_message_id_is_stringified(self, email: Email) -> None:
        body = {"Messages": [{"Status": "success", "To": [{"MessageID": 1152921504606846976}]}]}
        sent = _transport(RecordingHandler(content=json.dumps(body))).send(email)
        assert sent.message_id == "1152921504606846976"

    def test_missing_message_id_is_empty_string(self, email: Email) -> None:
        body = {"Messages": [{"Status": "success"}]}
        sent = _transport(RecordingHandler(content=json.dumps(body))).send(email)
        assert sent.message_id == ""

    def test_explicit_envelope_is_used(self, email: Email) -> None:
        handler = RecordingHandler(content=json.dumps(SUCCESS_BODY))
        envelope = Envelope(
            sender=Address(email="bounce@example.com", name="Bounce"),
            recipients=["other@example.com"],
        )
        sent = _transport(handler).send(email, envelope)

        body = json.loads(handler.requests[0].content)
        assert body["Messages"][0]["From"] == {"Email": "bounce@example.com", "Name": "Bounce"}
        assert body["Messages"][0]["To"] == [{"Email": "other@example.com", "Name": ""}]
        assert sent.envelope is envelope


class TestSendFailures:
    """Testes dos caminhos de erro."""

    def test_decoding_error(self, email: Email) -> None:
        transport = _transport(RecordingHandler(content="cannot-be-decoded"))
        with pytest.raises(MailjetTransportError) as exc_info:
            transport.send(email)

        assert str(exc_info.value) == 'Unable to send an email: "cannot-be-decoded" (code 200).'
        assert exc_info.value.status_code == 200
        assert exc_info.value.body == "cannot-be-decoded"

    def test_network_error(self, email: Email) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("boom", request=request)

        with pytest.raises(MailjetTransportError) as exc_info:
            _transport(handler).send(email)

        assert str(exc_info.value) == "Could not reach the remote server."
        assert exc_info.value.response is None
        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    def test_bad_request_with_api_error(self, email: Email) -> None:
        transport = _transport(RecordingHandler(400, json.dumps(BAD_REQUEST_BODY)))
        with pytest.raises(MailjetTransportError) as exc_info:
            transport.send(email)

        assert str(exc_info.value) == (
            'Unable to send an email: "The To is mandatory but missing from the input" (code 400).'
        )
        assert exc_info.value.status_code == 400

    def test_bad_request_without_error_message(self, email: Email) -> None:
        transport = _transport(RecordingHandler(400, "response-content"))
        with pytest.raises(MailjetTransportError, match=r'"response-content" \(code 400\)\.'):
            transport.send(email)

    def test_server_error_with_json_but_no_errors(self, email: Email) -> None:
        body = json.dumps({"ErrorMessage": "oops"})
        transport = _transport(RecordingHandler(500, body))
        with pytest.raises(MailjetTransportError) as exc_info:
            transport.send(email)
        assert str(exc_info.value) == f'Unable to send an email: "{body}" (code 500).'

    def test_api_error_on_success_status(self, email: Email) -> None:
        """Errors preenchido falha mesmo com status 2xx."""
        transport = _transport(RecordingHandler(200, json.dumps(BAD_REQUEST_BODY)))
        with pytest.raises(MailjetTransportError, match=r"missing from the input\" \(code 200\)"):
            transport.send(email)

    @pytest.mark.parametrize(
        "errors",
        [
            pytest.param([{"ErrorCode": "mj-0005", "StatusCode": 400}], id="no-error-message"),
            pytest.param(["mj-0005"], id="error-not-an-object"),
        ],
    )
    def test_api_errors_without_message_on_success_status(
        self, email: Email, errors: list[Any]
    ) -> None:
        """Errors preenchido sem ErrorMessage falha com o corpo bruto."""
        raw = json.dumps({"Messages": [{"Status": "error", "Errors": errors}]})
        transport = _transport(RecordingHandler(200, raw))
        with pytest.raises(MailjetTransportError) as exc_info:
            transport.send(email)

        assert str(exc_info.value) == f'Unable to send an email: "{raw}" (code 200).'
        assert exc_info.value.status_code == 200

    @pytest.mark.parametrize(
        "body",
        [
            pytest.param({"foo": "bar"}, id="missing-messages-key"),
            pytest.param({"Messages": "bar"}, id="messages-not-a-list"),
            pytest.param({"Messages": []}, id="messages-empty"),
        ],
    )
    def test_malformed_response(self, email: Email, body: dict[str, Any]) -> None:
        raw = json.dumps(body)
        transport = _transport(RecordingHandler(content=raw))
        with pytest.raises(MailjetTransportError) as exc_info:
            transport.send(email)

        assert str(exc_info.value) == f'Unable to send an email: "{raw}" malformed api response.'
        assert exc_info.value.response is not None

    def test_validation_error_happens_before_any_request(self) -> None:
        handler = RecordingHandler(content=json.dumps(SUCCESS_BODY))
        email = Email(
            sender="foo@example.com",
            to=["bar@example.com"],
            reply_to=[
                Address(email="qux@example.com", name="Qux"),
                Address(email="quux@example.com", name="Quux"),
            ],
        )
        with pytest.raises(ValidationError, match="only supports one Reply-To email, 2 given"):
            _transport(handler).send(email)
        assert handler.requests == []


class TestInterpretResponse:
    """Testes diretos do interpretador de respostas."""

    def test_interpret_success(self, email: Email) -> None:
        envelope = Envelope.from_email(email)
        response = httpx.Response(201, json=SUCCESS_BODY)
        sent = interpret_response(response, email=email, envelope=envelope)
        assert sent.message_id == "576460756513665525"
        assert sent.debug == response.text

    def test_interpret_json_list_is_malformed(self, email: Email) -> None:
        response = httpx.Response(200, content=b"[1]")
        with pytest.raises(MailjetTransportError, match="malformed api response"):
            interpret_response(response, email=email, envelope=Envelope.from_email(email))


class TestClientLifecycle:
    """Testes de fechamento do cliente HTTP."""

    def test_injected_client_is_not_closed(self) -> None:
        client = httpx.Client(transport=httpx.MockTransport(RecordingHandler()))
        with MailjetApiTransport(USER, PASSWORD, client):
            pass
        assert not client.is_closed
        client.close()

    def test_owned_client_is_closed(self) -> None:
        transport = MailjetApiTransport(USER, PASSWORD)
        transport.close()
        assert transport._client.is_closed
