"""Tests for required-field validation and its localised messages."""

from apa_references.domain.formatting.validation import is_blank, validate
from apa_references.domain.models.reference import (
    ArticleReference,
    Author,
    BookReference,
    CorporateAuthor,
    SocialMediaReference,
    ThesisReference,
)


def _book(**kw):
    data = dict(
        autores=[Author(sobrenome="Silva", nome="João")],
        ano="2019",
        titulo="Metodologia",
        editora="Atlas",
        edicao="2",
        local="São Paulo",
        isbn="978-85-0000-000-0",
    )
    data.update(kw)
    return BookReference(**data)


class TestIsBlank:
    def test_values(self):
        assert is_blank(None)
        assert is_blank("   ")
        assert is_blank([])
        assert not is_blank("x")
        assert not is_blank([1])


class TestUniversalRules:
    def test_complete_book(self):
        result = validate(_book())
        assert result.is_valid
        assert result.is_complete
        assert result.errors == []
        assert result.warnings == []

    def test_missing_title_and_year(self):
        result = validate(_book(titulo="", ano=""))
        assert not result.is_valid
        assert not result.is_complete
        assert result.missing_required == ["titulo", "ano"]
        assert "Título é obrigatório" in result.errors
        assert "Ano é obrigatório" in result.errors

    def test_no_author_is_a_warning(self):
        result = validate(_book(autores=[]))
        assert result.is_valid
        assert not result.is_complete
        assert any("título como identificador" in w for w in result.warnings)

    def test_corporate_precedence_warning(self):
        corp = CorporateAuthor(nomeCompleto="Editora Acadêmica")
        result = validate(_book(autorCorporativo=corp))
        assert result.is_valid
        assert any("autor corporativo tem precedência" in w for w in result.warnings)

    def test_url_without_scheme(self):
        result = validate(_book(url="www.example.org"))
        assert "URL deve começar com http:// ou https://" in result.warnings

    def test_english_messages(self):
        result = validate(_book(titulo=""), lang="en")
        assert "Title is required" in result.errors

    def test_unknown_language_falls_back_to_portuguese(self):
        result = validate(_book(titulo=""), lang="de")
        assert "Título é obrigatório" in result.errors


class TestVariantRules:
    def test_book_optional_fields(self):
        result = validate(_book(edicao=None, local=None, isbn=None))
        assert result.is_valid
        assert result.missing_optional == ["edicao", "local", "isbn"]

    def test_book_missing_publisher(self):
        result = validate(_book(editora=""))
        assert not result.is_valid
        assert "editora" in result.missing_required
        assert "Campo obrigatório ausente: editora" in result.errors

    def test_article_without_link_warns(self):
        ref = ArticleReference(
            autores=[Author(sobrenome="Silva", nome="João")],
            ano="2020",
            titulo="Title",
            periodico="Journal",
            volume="1",
            paginas="1-2",
        )
        result = validate(ref)
        assert result.is_valid
        assert "DOI ou URL recomendado para artigos" in result.warnings

    def test_article_missing_periodical(self):
        ref = ArticleReference(ano="2020", titulo="Title", doi="10.1/x")
        result = validate(ref)
        assert result.missing_required == ["periodico", "volume", "paginas"]

    def test_thesis_requires_institution(self):
        ref = ThesisReference(autores=[Author(sobrenome="Silva")], ano="2022", titulo="Tese")
        result = validate(ref)
        assert result.missing_required == ["instituicao"]
        assert "tipoTrabalho" in result.missing_optional

    def test_long_social_post_warns(self):
        ref = SocialMediaReference(
            autorCorporativo=CorporateAuthor(nomeCompleto="NASA"),
            ano="2022",
            titulo="Post",
            plataforma="Twitter",
            username="NASA",
            conteudo=" ".join(["palavra"] * 25),
            tipoPost="Tweet",
        )
        result = validate(ref)
        assert result.is_valid
        assert "Conteúdo da postagem excede 20 palavras e será truncado" in result.warnings
