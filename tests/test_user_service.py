"""
Tests for the enrichment service.
"""

from unittest.mock import Mock

import pytest

from user_quotes_api.app.core.exceptions import InvalidArgumentError, QuoteProviderError
from user_quotes_api.app.entities.user import UserEntity
from user_quotes_api.app.repositories.base import Repository
from user_quotes_api.app.services.user_service import UserService, build_filter

from .conftest import QUOTE, StubQuoteClient, make_users


class TestAddUser:
    """Writes through the service"""

    def test_add_user_returns_persisted_entity(self, service, quote_client):
        saved = service.add_user(UserEntity(name="Messi", username="mes", email="mes@mes.sp"))

        assert saved.id > 0
        assert saved.quote is None
        assert quote_client.calls == 0


class TestGetUsers:
    """Listing with enrichment and validation"""

    def test_every_listed_user_carries_the_quote(self, service):
        for user in make_users():
            service.add_user(user)

        result = service.get_users(0, 10)

        assert [(dto.name, dto.username, dto.email) for dto in result] == [
            (user.name, user.username, user.email) for user in make_users()
        ]
        assert all(dto.quote == QUOTE for dto in result)

    def test_only_page_records_are_enriched(self, service, quote_client):
        for user in make_users():
            service.add_user(user)

        result = service.get_users(1, 3)

        assert [dto.name for dto in result] == ["John", "Jennifer", "Michael"]
        assert quote_client.calls == 3

    def test_enrichment_is_not_stored(self, service, memory_repository):
        saved = service.add_user(UserEntity(name="Messi", username="mes", email="mes@mes.sp"))

        service.get_users(0, 1)

        assert memory_repository.find_by_id(saved.id).quote is None

    def test_each_record_gets_its_own_quote_call(self, memory_repository):
        quotes = iter(["first", "second"])
        quote_client = Mock()
        quote_client.get_quote.side_effect = lambda: next(quotes)
        service = UserService(memory_repository, quote_client)
        service.add_user(UserEntity(name="A", username="a", email="a@mail.com"))
        service.add_user(UserEntity(name="B", username="b", email="b@mail.com"))

        result = service.get_users(0, 2)

        assert [dto.quote for dto in result] == ["first", "second"]

    @pytest.mark.parametrize("page, size", [(-1, 0), (0, -1), (-3, -3)])
    def test_negative_arguments_rejected_before_repository(self, page, size):
        repository = Mock(spec=Repository)
        service = UserService(repository, StubQuoteClient())

        with pytest.raises(InvalidArgumentError):
            service.get_users(page, size)

        repository.find_all.assert_not_called()

    def test_zero_size_returns_empty(self, service, quote_client):
        for user in make_users():
            service.add_user(user)

        assert service.get_users(0, 0) == []
        assert quote_client.calls == 0

    def test_filter_with_pagination(self, service):
        for user in make_users():
            service.add_user(user)
        predicate = build_filter("J", "j")

        assert [dto.name for dto in service.get_users(0, 2, predicate)] == ["James", "John"]
        assert [dto.name for dto in service.get_users(1, 2, predicate)] == ["Jennifer"]

    def test_provider_failure_propagates(self, memory_repository):
        quote_client = Mock()
        quote_client.get_quote.side_effect = QuoteProviderError("down")
        service = UserService(memory_repository, quote_client)
        service.add_user(UserEntity(name="Messi", username="mes", email="mes@mes.sp"))

        with pytest.raises(QuoteProviderError):
            service.get_users(0, 10)


class TestGetUser:
    """Single lookup"""

    def test_found_user_is_enriched(self, service, quote_client):
        saved = service.add_user(UserEntity(name="Messi", username="mes", email="mes@mes.sp"))

        dto = service.get_user(saved.id)

        assert dto.id == saved.id
        assert dto.quote == QUOTE
        assert quote_client.calls == 1

    def test_missing_user_is_none_without_quote_call(self, service, quote_client):
        assert service.get_user(99) is None
        assert quote_client.calls == 0


class TestBuildFilter:
    """Prefix predicate"""

    def test_is_case_sensitive(self):
        predicate = build_filter("J", "j")

        assert predicate(UserEntity(name="James", username="james", email="x"))
        assert not predicate(UserEntity(name="james", username="james", email="x"))
        assert not predicate(UserEntity(name="James", username="James", email="x"))

    def test_missing_parameters_match_everything(self):
        user = UserEntity(name="Mary", username="mary", email="x")

        assert build_filter()(user)
        assert build_filter(name="M")(user)
        assert build_filter(username="m")(user)
        assert not build_filter(name="M", username="x")(user)
