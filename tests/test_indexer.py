import asyncio
import random
import statistics
from concurrent.futures import ThreadPoolExecutor

import pytest

from ngram_search import Index, IndexBuilder, ngrams


def test_index_from_distinct(index, options):
    results = index.search("dev aem", 5)
    assert options[results[0][0]] == "AEM"

    result = index.best_match("DAR")
    assert options[result] == "DAR"


def test_index_from_identified(options):
    index = Index.from_identified(enumerate(options), 3)

    results = index.search("dev aem", 1)
    assert len(results) == 1
    assert options[results[0][0]] == "AEM"

    assert options[index.best_match("DAR")] == "DAR"


def test_index_manual_builder():
    builder = Index.builder(3)
    builder.insert("mod", "MOD")
    builder.insert("mod", "modification")
    builder.insert("sow", "statement of work")
    index = builder.build()

    assert index.best_match("modif") == "mod"
    assert index.best_match("work statement") == "sow"


def test_item_ids_are_returned_untouched():
    key = ("purpose", 7)
    index = Index.from_identified([(key, "SAFETY"), ("other", "SUPPLY")], 3)
    assert index.best_match("safety") is key


def test_search_properties(index, options):
    inserted = set(range(len(options)))
    for query in ["dev aem", "risk", "transfer of data", "software service", "xyz"]:
        for k in (1, 3, 10, 100):
            results = index.search(query, k)
            assert len(results) <= k
            scores = [score for _, score in results]
            assert all(item_id in inserted for item_id, _ in results)
            assert all(score >= 0.0 for score in scores)
            assert scores == sorted(scores, reverse=True)


def test_best_match_ranks_closest_term_first(index, options):
    assert options[index.best_match("risk transfer")] == "RISK TRANSFER"
    assert options[index.best_match("transfer")] == "TRANSFER"
    assert options[index.best_match("softwar")] == "SOFTWARE"


def test_unknown_ngrams_score_zero(index):
    results = index.search("xyz", 3)
    assert len(results) == 3
    assert all(score == 0.0 for _, score in results)
    assert index.best_match("xyz") is None


def test_best_match_never_returns_zero_score(index):
    for query in ["qqq", "zzzz", "dev aem", "DAR", "p/q"]:
        match = index.best_match(query)
        if match is not None:
            assert index.search(query, 1)[0][1] > 0.0


def test_query_shorter_than_width(index):
    assert index.search("da", 5) == []
    assert index.best_match("da") is None


def test_empty_index():
    index = Index.builder(3).build()
    assert index.num_terms == 0
    assert index.average_term_length == 0.0
    assert index.search("anything", 10) == []
    assert index.best_match("anything") is None


def test_max_results_bounds(index, options):
    assert index.search("dev aem", 0) == []
    assert len(index.search("dev aem", 1000)) == len(options)
    with pytest.raises(ValueError):
        index.search("dev aem", -1)


def test_repeated_queries_are_identical(index):
    first = index.search("proposal quote", 25)
    second = index.search("proposal quote", 25)
    assert first == second


def test_tied_scores_keep_insertion_order():
    index = Index.from_distinct(["abc", "abc", "abc"], 3)
    results = index.search("abc", 3)
    assert [item_id for item_id, _ in results] == [0, 1, 2]
    assert results[0][1] == results[1][1] == results[2][1]


def test_postings_accumulate_frequency():
    index = Index.from_distinct(["aaaa", "aab"], 2)
    assert index.get_posting_list("aa") == ((0, 3), (1, 1))
    assert index.get_document_frequency("aa") == 2
    assert index.get_collection_frequency("aa") == 4
    assert index.get_posting_list("zz") == ()


def test_posting_positions_are_unique_and_in_range(index):
    for gram in index.ngrams:
        positions = [pos for pos, _ in index.get_posting_list(gram)]
        assert len(positions) == len(set(positions))
        assert all(0 <= pos < index.num_terms for pos in positions)


def test_ngrams_are_sorted(index):
    assert index.ngrams == sorted(index.ngrams)


def test_term_records(index):
    assert index.item_id(7) == 7
    assert index.term_length(7) == len(ngrams("ESA PO", 3))


def test_average_length_matches_batch_mean():
    rng = random.Random(1234)
    alphabet = "abcdefgh "
    for _ in range(20):
        terms = [
            "".join(rng.choice(alphabet) for _ in range(rng.randint(0, 12)))
            for _ in range(rng.randint(1, 30))
        ]
        builder = IndexBuilder(3)
        for i, term in enumerate(terms):
            builder.insert(i, term)
            expected = statistics.mean(len(ngrams(t, 3)) for t in terms[:i + 1])
            assert builder.average_term_length == pytest.approx(expected)
        assert builder.build().average_term_length == pytest.approx(expected)


def test_terms_without_ngrams_are_indexed():
    index = Index.from_distinct(["ab", "abcd"], 3)
    assert index.num_terms == 2
    assert index.average_term_length == pytest.approx(1.0)
    assert index.best_match("abcd") == 1


def test_builder_is_consumed_by_build():
    builder = Index.builder(3)
    builder.insert(0, "abc")
    builder.build()

    with pytest.raises(RuntimeError):
        builder.insert(1, "def")
    with pytest.raises(RuntimeError):
        builder.build()


def test_builder_width_is_shared_with_index():
    builder = Index.builder(4)
    assert builder.n == 4
    assert builder.build().n == 4


def test_async_variants_match_sync(index):
    async def run():
        return (
            await index.search_async("dev aem", 5),
            await index.best_match_async("DAR"),
        )

    results, best = asyncio.run(run())
    assert results == index.search("dev aem", 5)
    assert best == index.best_match("DAR")


def test_concurrent_readers(index):
    queries = ["dev aem", "DAR", "risk transfer", "software", "xyz"] * 20
    expected = [index.search(q, 5) for q in queries]

    with ThreadPoolExecutor(max_workers=8) as pool:
        actual = list(pool.map(lambda q: index.search(q, 5), queries))

    assert actual == expected


def test_summarize_index(index, capsys):
    index.summarize_index()
    out = capsys.readouterr().out
    assert "Search terms indexed: 25" in out
    assert "N-gram width: 3" in out
