from pipelines.extractive_pipeline import SummaryResult, extract_key_points, summarize_local


def _sentences_of(summary: str):
    return [s for para in summary.split("\n\n") for s in para.split(". ") if s]


class TestExtractKeyPoints:
    def test_empty_summary(self):
        assert extract_key_points("", 7) == []

    def test_ranked_by_frequency_within_summary(self):
        summary = (
            "Budget talks stalled again this week. "
            "The council approved the solar budget and the solar tender. "
            "Solar budget hearings continue next month."
        )
        assert extract_key_points(summary, 7) == [
            "The council approved the solar budget and the solar tender.",
            "Solar budget hearings continue next month.",
            "Budget talks stalled again this week.",
        ]

    def test_caps_count(self, high_sentences):
        assert extract_key_points(" ".join(high_sentences), 3) == high_sentences[:3]

    def test_length_bounds_and_uniqueness(self):
        too_long = "Solar " * 40 + "panels."
        just_right = "Solar panels glow at dawn."
        repeated = "Solar farms expand across the plains."
        text = " ".join([too_long, just_right, repeated, repeated])
        points = extract_key_points(text, 7)
        assert too_long not in points
        assert points.count(repeated) == 1
        assert just_right in points
        assert all(20 < len(p) < 200 for p in points)

    def test_199_included_200_excluded(self):
        s199 = "Solar " + "x" * 192 + "."
        s200 = "Solar " + "y" * 193 + "."
        assert (len(s199), len(s200)) == (199, 200)
        assert extract_key_points(f"{s199} {s200}", 7) == [s199]


class TestSummarizeLocal:
    def test_short_input_yields_empty_result(self):
        result = summarize_local("Short.", 5)
        assert result == SummaryResult(summary="", key_points=[])
        assert result.to_dict() == {"summary": "", "keyPoints": []}

    def test_empty_input(self):
        assert summarize_local("", 5) == SummaryResult()

    def test_twelve_sentences_keep_top_ten(self, twelve_sentence_text, high_sentences, low_sentences):
        result = summarize_local(twelve_sentence_text, 5)
        expected = "\n\n".join([
            " ".join(high_sentences[0:3]),
            " ".join(high_sentences[3:6]),
            " ".join(high_sentences[6:9]),
            high_sentences[9],
        ])
        assert result.summary == expected
        for low in low_sentences:
            assert low not in result.summary
        assert result.key_points == high_sentences[:7]

    def test_floor_of_ten_sentences(self, twelve_sentence_text):
        result = summarize_local(twelve_sentence_text, 1)
        assert len(_sentences_of(result.summary)) == 10

    def test_larger_request_takes_more(self, twelve_sentence_text, high_sentences, low_sentences):
        result = summarize_local(twelve_sentence_text, 12)
        paragraphs = result.summary.split("\n\n")
        assert len(paragraphs) == 4
        # equal-score low sentences keep their document order after the highs
        assert paragraphs[-1] == " ".join([high_sentences[9]] + low_sentences)

    def test_salience_order_not_document_order(self):
        text = (
            "A quiet preface mentions nothing of note. "
            "Rockets rockets rockets launch rockets daily. "
            "Engineers build rockets near the coast."
        )
        result = summarize_local(text, 1)
        assert result.summary.startswith("Rockets rockets rockets launch rockets daily.")

    def test_key_points_come_from_summary(self, long_text):
        result = summarize_local(long_text, 5)
        assert result.key_points
        assert len(result.key_points) <= 7
        assert all(p in result.summary for p in result.key_points)
        assert len(set(result.key_points)) == len(result.key_points)
