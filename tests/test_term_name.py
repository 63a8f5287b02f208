from structurer.term_name import join_name, normalize_separators, split_bilingual


def test_single_pair_fullwidth():
    assert split_bilingual("品質（quality）") == ("品質", "quality")


def test_single_pair_halfwidth_with_space():
    assert split_bilingual("品質マネジメントシステム (quality management system)") == (
        "品質マネジメントシステム",
        "quality management system",
    )


def test_english_commas_are_normalized_inside_single_pair():
    assert split_bilingual("特性（characteristic,feature）") == (
        "特性",
        "characteristic, feature",
    )


def test_multiple_pairs():
    assert split_bilingual("適合（conformity），合致（conformance）") == (
        "適合、合致",
        "conformity, conformance",
    )


def test_multiple_parts_with_one_missing_english():
    assert split_bilingual("依頼者，顧客（customer），買い手（buyer）") == (
        "依頼者、顧客、買い手",
        "customer, buyer",
    )


def test_single_trailing_part_without_repeat_is_kept_verbatim():
    assert split_bilingual("顧客（customer）、依頼者") == ("顧客（customer）、依頼者", None)


def test_no_english_keeps_name_with_normalized_separators():
    assert split_bilingual("組織的品質方針") == ("組織的品質方針", None)
    assert split_bilingual("適合, 合致") == ("適合、合致", None)


def test_parenthesis_not_at_end_is_kept_verbatim():
    assert split_bilingual("品質（quality）特性") == ("品質（quality）特性", None)


def test_join_name_has_no_separator():
    assert join_name(["組織的", " 品質方針 "]) == "組織的品質方針"


def test_normalize_separators():
    assert normalize_separators("A，B , C、D") == "A、B、C、D"
