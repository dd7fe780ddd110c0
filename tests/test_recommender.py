import types

from findjob.utils.recommender import (
    calculate_recommendation_scores,
    calculate_match_score,
    parse_skill_terms,
)


def make_item(item_id, skill_names, view_count=0):
    return {
        "item_id": item_id,
        "skill_names": set(skill_names),
        "item_object": types.SimpleNamespace(view_count=view_count)
    }


def test_parse_skill_terms_splits_free_text():
    text = "Python, SQL\n- Docker; Excel • Arabic،English"
    assert parse_skill_terms(text) == {"python", "sql", "docker", "excel", "arabic", "english"}
    assert parse_skill_terms(None) == set()
    assert parse_skill_terms("  ,, \n") == set()


def test_empty_source_returns_empty():
    res = calculate_recommendation_scores(set(), [make_item("1", ["python"])])
    assert res == []


def test_items_without_skills_are_skipped():
    res = calculate_recommendation_scores({"python"}, [make_item("1", [])])
    assert res == []


def test_exact_matches_score():
    source = {"python", "django"}
    items = [make_item("1", ["python", "flask"]), make_item("2", ["javascript"])]
    scored = calculate_recommendation_scores(source, items)
    # only item 1 has one exact match => score >= 1
    assert [item["item_id"] for item in scored] == ["1"]
    assert scored[0]["score"] >= 1.0


def test_fuzzy_matches_score():
    source = {"reactjs"}
    # fuzzy match: 'react' should be similar
    items = [make_item("1", ["react"]), make_item("2", ["angular"])]
    scored = calculate_recommendation_scores(source, items)
    ids = [s["item_id"] for s in scored]
    assert "1" in ids
    assert "2" not in ids


def test_threshold_is_configurable():
    source = {"reactjs"}
    items = [make_item("1", ["react"])]
    assert calculate_recommendation_scores(source, items, threshold=0.9) == []


def test_sorting_and_view_count_tiebreaker():
    source = {"python"}
    # two items with same score but different popularity
    item_a = make_item("a", ["python"], view_count=3)
    item_b = make_item("b", ["python"], view_count=5)
    scored = calculate_recommendation_scores(source, [item_a, item_b])
    assert scored[0]["item_id"] == "b"
    assert scored[1]["item_id"] == "a"


def test_match_score_is_share_of_target_covered():
    requirements = {"python", "sql", "docker", "kubernetes"}
    assert calculate_match_score({"python", "sql"}, requirements) == 50
    assert calculate_match_score(requirements, requirements) == 100
    assert calculate_match_score(set(), requirements) == 0
    assert calculate_match_score({"python"}, set()) == 0


def test_match_score_never_exceeds_100():
    # 多個來源詞彙模糊比對到同一個需求
    assert calculate_match_score({"reactjs", "reacts"}, {"react"}) <= 100
    assert calculate_match_score({"react", "reactjs", "reacts"}, {"react"}) == 100


def test_fuzzy_variants_credit_a_requirement_only_once():
    # 兩個拼錯的 python 只能涵蓋 python 這一項需求，java 仍未涵蓋
    assert calculate_match_score({"pythn", "pyton"}, {"python", "java"}) <= 50


def test_ranking_prefers_match_score_over_raw_overlap():
    source = {"a", "b"}
    # broad: 命中 2 項但只涵蓋一半需求；narrow: 命中 1 項且完全涵蓋
    broad = make_item("broad", ["a", "b", "c", "d"], view_count=10)
    narrow = make_item("narrow", ["a"])
    scored = calculate_recommendation_scores(source, [broad, narrow])
    assert [s["item_id"] for s in scored] == ["narrow", "broad"]
    assert [s["match_score"] for s in scored] == [100, 50]
