"""Unit tests for the author engine."""

from datetime import date

from sqlalchemy import func
from sqlmodel import select

from src.catalog.core.errors import AlreadyExists, NotFound, Unexpected
from src.catalog.core.models.change_set import SetAuthorName, SetBirthDate
from src.catalog.core.models.enums import PublicationStatus
from src.catalog.entities.author import Author, AuthorRepository, AuthorTable


def count_authors(db_service) -> int:
    with db_service.session_scope() as session:
        return session.exec(select(func.count()).select_from(AuthorTable)).one()


class TestRegisterAuthor:
    def test_register_assigns_id(self, author_service):
        result = author_service.register_author(
            Author(name="Natsume Soseki", birth_date=date(1867, 2, 9))
        )

        assert result.is_ok
        assert result.value.id is not None
        assert result.value.name == "Natsume Soseki"
        assert author_service.get_author_with_books(result.value.id).unwrap().author == result.value

    def test_duplicate_name_and_birth_date_is_rejected(self, author_service, db_service):
        author = Author(name="Natsume Soseki", birth_date=date(1867, 2, 9))
        author_service.register_author(author).unwrap()

        result = author_service.register_author(author)

        assert not result.is_ok
        assert result.error == AlreadyExists("author")
        assert count_authors(db_service) == 1

    def test_same_name_with_other_birth_date_is_allowed(self, author_service, db_service):
        author_service.register_author(
            Author(name="Natsume Soseki", birth_date=date(1867, 2, 9))
        ).unwrap()

        result = author_service.register_author(
            Author(name="Natsume Soseki", birth_date=date(1900, 1, 1))
        )

        assert result.is_ok
        assert count_authors(db_service) == 2


class TestPartialUpdateAuthor:
    def test_updates_only_supplied_fields(self, author_service, make_author):
        author = make_author()

        result = author_service.partial_update_author(author.id, (SetAuthorName("Soseki"),))

        updated = result.unwrap()
        assert updated.name == "Soseki"
        assert updated.birth_date == author.birth_date

    def test_updates_both_fields(self, author_service, make_author):
        author = make_author()

        updated = author_service.partial_update_author(
            author.id, (SetAuthorName("Mori Ogai"), SetBirthDate(date(1862, 2, 17)))
        ).unwrap()

        assert updated == Author(id=author.id, name="Mori Ogai", birth_date=date(1862, 2, 17))

    def test_empty_change_set_returns_current_author(self, author_service, make_author):
        author = make_author()

        result = author_service.partial_update_author(author.id, ())

        assert result.unwrap() == author

    def test_unknown_author(self, author_service):
        result = author_service.partial_update_author(9999, (SetAuthorName("Nobody"),))

        assert result.error == NotFound("author id", field="id")

    def test_unknown_author_with_empty_change_set(self, author_service):
        result = author_service.partial_update_author(9999, ())

        assert result.error == NotFound("author id", field="id")

    def test_collision_with_another_author(self, author_service, make_author):
        make_author(name="Mori Ogai", birth_date=date(1862, 2, 17))
        author = make_author()

        result = author_service.partial_update_author(
            author.id, (SetAuthorName("Mori Ogai"), SetBirthDate(date(1862, 2, 17)))
        )

        assert result.error == AlreadyExists("author")
        assert author_service.get_author_with_books(author.id).unwrap().author == author

    def test_zero_rows_updated_is_not_found(self, author_service, make_author, monkeypatch):
        author = make_author()
        monkeypatch.setattr(AuthorRepository, "update_fields", lambda self, *args: 0)

        result = author_service.partial_update_author(author.id, (SetAuthorName("Soseki"),))

        assert result.error == NotFound("author id", field="id")

    def test_missing_after_update_is_unexpected(self, author_service, make_author, monkeypatch):
        author = make_author()
        original_get = AuthorRepository.get
        reads = []

        def get_once(self, author_id):
            reads.append(author_id)
            return original_get(self, author_id) if len(reads) == 1 else None

        monkeypatch.setattr(AuthorRepository, "get", get_once)

        result = author_service.partial_update_author(author.id, (SetAuthorName("Soseki"),))

        assert result.error == Unexpected("author")


class TestGetAuthorWithBooks:
    def test_author_without_books(self, author_service, make_author):
        author = make_author()

        view = author_service.get_author_with_books(author.id).unwrap()

        assert view.author == author
        assert view.books == []

    def test_lists_linked_books_only(self, author_service, make_author, make_book):
        soseki = make_author()
        ogai = make_author(name="Mori Ogai", birth_date=date(1862, 2, 17))
        kokoro = make_book([soseki.id])
        sanshiro = make_book(
            [soseki.id, ogai.id], title="Sanshiro", publication_status=PublicationStatus.PUBLISHED
        )
        make_book([ogai.id], title="Maihime")

        view = author_service.get_author_with_books(soseki.id).unwrap()

        assert [book.id for book in view.books] == [kokoro.id, sanshiro.id]
        assert view.books[1].publication_status is PublicationStatus.PUBLISHED

    def test_unknown_author(self, author_service):
        result = author_service.get_author_with_books(9999)

        assert result.error == NotFound("author id", field="id")
