from travel_doc_parser.classifier import classify_type, probabilities, score_text
from travel_doc_parser.rules import default_rules

def test_flight_keyword_gives_flight():
    assert classify_type("your flight to rome", default_rules()) == "flight"

def test_flight_wins_over_hotel_keywords():
    rules = default_rules()
    assert classify_type("hotel confirmation", rules) == "flight"
    # "reservation" is in both sets, flight is checked first
    assert classify_type("hotel reservation", rules) == "flight"

def test_hotel_keywords_without_flight_keywords():
    assert classify_type("your stay at our hotel", default_rules()) == "hotel"
    assert classify_type("accommodation booking", default_rules()) == "hotel"

def test_no_keywords_gives_other():
    assert classify_type("museum ticket, adult, 20 eur", default_rules()) == "other"

def test_probabilities_follow_keyword_counts(boarding_pass):
    probs, top, conf = probabilities(boarding_pass, default_rules())
    assert top == "flight"
    assert conf == probs["flight"]
    assert abs(sum(probs.values()) - 1.0) < 1e-9

def test_probabilities_uniform_without_keywords():
    probs, top, conf = probabilities("", default_rules())
    assert set(probs) == {"flight", "hotel", "other"}
    assert all(abs(p - 1/3) < 1e-9 for p in probs.values())

def test_fuzzy_boost_for_misspelled_keyword():
    probs, top, _ = probabilities("accomodation for two", default_rules())
    assert probs["hotel"] > probs["flight"]
    assert top == "hotel"

def test_scores_use_lowercased_text_like_classify_type():
    scores = score_text("FLIGHT\n\nBOARDING", default_rules())
    assert scores["flight"] == 2.0
    assert scores["other"] == 0.0

def test_temperature_flattens_probabilities():
    rules = dict(default_rules())
    sharp, _, _ = probabilities("flight flight boarding", rules)
    rules["temperature"] = 10.0
    flat, _, _ = probabilities("flight flight boarding", rules)
    assert flat["flight"] < sharp["flight"]
    assert abs(sum(flat.values()) - 1.0) < 1e-9
