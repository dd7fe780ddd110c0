# findjob/utils/recommender.py
# 履歷技能 <-> 職缺需求 的比對 (完全相同 + Levenshtein 模糊比對)
import re
import Levenshtein
from typing import List, Dict, Optional, Set

# 逗號 (含阿拉伯文逗號)、分號、換行、項目符號 皆視為分隔
_TERM_SEPARATORS = re.compile(r"[,،;\n\r•|/]+")

def parse_skill_terms(text: Optional[str]) -> Set[str]:
    """
    將自由文字的技能 / 需求欄位拆成小寫詞彙集合
    e.g. "Python, SQL\n- Excel" -> {"python", "sql", "excel"}
    """
    if not text:
        return set()
    terms = set()
    for raw in _TERM_SEPARATORS.split(text):
        term = raw.strip(" \t-*.").lower()
        if term:
            terms.add(term)
    return terms

# (輔助函式) 取得兩個字串的 Levenshtein 相似度 (0.0 ~ 1.0)
def _get_string_similarity(s1: str, s2: str) -> float:
    # Levenshtein.distance 算出的是 "編輯距離" (差多少)
    # 將其標準化為 "相似度"，1.0 表示完全相同
    if not s1 or not s2:
        return 0.0
    distance = Levenshtein.distance(s1.lower(), s2.lower())
    max_len = max(len(s1), len(s2))
    return 1.0 - (distance / max_len)

def _overlap_score(source: Set[str], target: Set[str], threshold: float) -> float:
    # 1. (詞彙重疊度)
    exact_matches = source.intersection(target)
    total_score = len(exact_matches) * 1.0

    # 2. (Levenshtein 相似度) 每個來源詞彙只取最佳的一個
    source_fuzzy = source - exact_matches
    target_fuzzy = target - exact_matches

    for s_term in source_fuzzy:
        best_match_score = 0.0
        for t_term in target_fuzzy:
            similarity = _get_string_similarity(s_term, t_term)
            if similarity > threshold:
                best_match_score = max(best_match_score, similarity)
        total_score += best_match_score

    return total_score

def _coverage_score(source: Set[str], target: Set[str], threshold: float) -> float:
    # 以目標需求為準：每個需求最多得 1 分，多個來源詞彙不會重複計入同一個需求
    total_score = 0.0
    for t_term in target:
        if t_term in source:
            total_score += 1.0
            continue
        best_match_score = 0.0
        for s_term in source:
            similarity = _get_string_similarity(s_term, t_term)
            if similarity > threshold:
                best_match_score = max(best_match_score, similarity)
        total_score += best_match_score
    return total_score

def calculate_match_score(
    source_skill_names: Set[str],
    target_skill_names: Set[str],
    threshold: float = 0.7
) -> int:
    """
    回傳 0 ~ 100 的匹配分數：來源技能涵蓋了多少目標需求
    任一方為空時回傳 0
    """
    if not source_skill_names or not target_skill_names:
        return 0
    score = _coverage_score(source_skill_names, target_skill_names, threshold)
    return min(100, round(score / len(target_skill_names) * 100))

def calculate_recommendation_scores(
    # 'source_skills' (e.g., 履歷上的技能)
    source_skill_names: Set[str],
    # 'target_items' (e.g., 所有已上架的職缺)
    target_items: List[Dict],
    threshold: float = 0.7
) -> List[Dict]:
    """
    計算來源 (Source) 與所有目標 (Target) 的推薦分數
    """
    recommendations = []

    if not source_skill_names:
        return []

    for item in target_items:
        item_skill_names = item.get("skill_names", set())
        if not item_skill_names:
            continue

        total_score = _overlap_score(source_skill_names, item_skill_names, threshold)

        if total_score > 0:
            recommendations.append({
                "item_id": item.get("item_id"),
                "score": total_score,
                "match_score": calculate_match_score(source_skill_names, item_skill_names, threshold),
                "item_object": item.get("item_object")
            })

    # 排序邏輯
    recommendations.sort(
        key=lambda x: (
            x["match_score"], # 主要排序鍵：匹配分數 (高到低)
            x["score"], # 次要排序鍵：推薦分數
            # 最後依瀏覽次數 (高到低)
            getattr(x.get("item_object"), 'view_count', 0) or 0
        ),
        reverse=True
    )

    return recommendations
