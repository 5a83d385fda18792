"""Tests for the batch mutator."""

from __future__ import annotations

from indexbridge.core.mutator import BatchMutator


class TestUpserts:
    def test_one_action_per_document(self, articles) -> None:
        actions = BatchMutator().upserts(articles)
        assert [a.id for a in actions] == ["2", "5", "9"]
        assert all(a.action == "update" for a in actions)

    def test_body_has_header_and_doc_per_document(self, articles) -> None:
        mutator = BatchMutator()
        body = mutator.to_body(mutator.upserts(articles))
        assert len(body) == 2 * len(articles)
        assert body[0] == {"update": {"_index": "articles", "_id": "2"}}
        assert body[1] == {
            "doc": {"id": 2, "title": "Solar nowcasting with satellites", "status": "published"},
            "doc_as_upsert": True,
        }

    def test_document_index_respected(self, article_cls) -> None:
        mutator = BatchMutator()
        body = mutator.to_body(mutator.upserts([article_cls(id=1, title="Old", index="archive")]))
        assert body[0]["update"]["_index"] == "archive"

    def test_index_prefix(self, articles) -> None:
        actions = BatchMutator(index_prefix="staging").upserts(articles[:1])
        assert actions[0].index == "staging_articles"

    def test_empty(self) -> None:
        mutator = BatchMutator()
        assert mutator.upserts([]) == []
        assert mutator.to_body([]) == []


class TestDeletes:
    def test_one_directive_per_document(self, articles) -> None:
        mutator = BatchMutator()
        body = mutator.to_body(mutator.deletes(articles))
        assert body == [
            {"delete": {"_index": "articles", "_id": "2"}},
            {"delete": {"_index": "articles", "_id": "5"}},
            {"delete": {"_index": "articles", "_id": "9"}},
        ]

    def test_accepts_generator(self, articles) -> None:
        actions = BatchMutator().deletes(a for a in articles)
        assert len(actions) == 3
