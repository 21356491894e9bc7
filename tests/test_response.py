"""Tests for response wrappers."""

from http import HTTPStatus

import pytest

from placeholder_client.exceptions import DeserializationError, StatusCodeMismatchError
from placeholder_client.models import CommentDto
from placeholder_client.response import ValidatableResponse

from conftest import create_response


class TestValidatableResponse:
    """Tests for status assertions."""

    def test_matching_status_returns_self(self, comment_data):
        """Test a matching status chains."""
        response = ValidatableResponse(create_response(201, comment_data, method="POST"))
        assert response.status_code(HTTPStatus.CREATED) is response

    def test_accepts_plain_int(self, comment_data):
        """Test ints and HTTPStatus members are interchangeable."""
        response = ValidatableResponse(create_response(200, comment_data))
        response.status_code(200).status_code(HTTPStatus.OK)

    def test_mismatch_raises(self):
        """Test a mismatch raises with both codes and the body."""
        raw = create_response(404, {"detail": "missing"}, method="PUT", path="/comments/1")
        response = ValidatableResponse(raw)

        with pytest.raises(StatusCodeMismatchError) as exc_info:
            response.status_code(HTTPStatus.OK)

        error = exc_info.value
        assert error.expected == 200
        assert error.actual == 404
        assert error.method == "PUT"
        assert error.url == "http://placeholder.test/comments/1"
        assert "missing" in error.body

    def test_accessors(self, comment_data):
        """Test raw response accessors."""
        response = ValidatableResponse(create_response(200, comment_data))
        assert response.status == 200
        assert response.json() == comment_data
        assert response.headers["content-type"] == "application/json"
        assert "nice" in response.text

    def test_repr(self):
        """Test repr shows the request and status."""
        response = ValidatableResponse(create_response(204, text=""))
        assert repr(response) == "ValidatableResponse(GET http://placeholder.test/comments -> 204)"


class TestExtractableResponse:
    """Tests for body extraction."""

    def test_as_model(self, comment_data):
        """Test deserializing a single object."""
        comment = ValidatableResponse(create_response(200, comment_data)).extract().as_model(CommentDto)
        assert comment.id == 1
        assert comment.post_id == 1
        assert comment.body == "nice"

    def test_as_models_keeps_order(self, comments_list):
        """Test a list keeps server order."""
        comments = ValidatableResponse(create_response(200, comments_list)).extract().as_models(CommentDto)
        assert [c.id for c in comments] == [3, 1, 2]

    def test_as_model_wrong_shape(self, comments_list):
        """Test an array body cannot become one object."""
        extract = ValidatableResponse(create_response(200, comments_list)).extract()
        with pytest.raises(DeserializationError) as exc_info:
            extract.as_model(CommentDto)
        assert exc_info.value.target == "CommentDto"
        assert "third" in exc_info.value.body

    def test_as_models_wrong_shape(self, comment_data):
        """Test an object body cannot become a list."""
        extract = ValidatableResponse(create_response(200, comment_data)).extract()
        with pytest.raises(DeserializationError) as exc_info:
            extract.as_models(CommentDto)
        assert exc_info.value.target == "List[CommentDto]"

    def test_invalid_field_type(self):
        """Test a field of the wrong type fails deserialization."""
        extract = ValidatableResponse(create_response(200, {"id": "not-a-number"})).extract()
        with pytest.raises(DeserializationError):
            extract.as_model(CommentDto)

    def test_not_json(self):
        """Test a non-JSON body fails with the body attached."""
        extract = ValidatableResponse(create_response(200, text="<html>oops</html>")).extract()
        with pytest.raises(DeserializationError) as exc_info:
            extract.as_model(CommentDto)
        assert exc_info.value.body == "<html>oops</html>"
        assert exc_info.value.status_code == 200

    def test_text(self):
        """Test raw text access."""
        extract = ValidatableResponse(create_response(200, text="plain")).extract()
        assert extract.text == "plain"
