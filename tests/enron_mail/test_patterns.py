from enron_mail.patterns import extract_addresses, extract_names, split_on_commas


def test_extract_addresses_in_order() -> None:
    text = "Alice Smith <alice@example.com>, Bob <bob@example.org>"

    assert extract_addresses(text) == ["alice@example.com", "bob@example.org"]


def test_extract_addresses_handles_enron_style_list() -> None:
    text = "john.arnold@enron.com, k..allen@enron.com"

    assert extract_addresses(text) == ["john.arnold@enron.com", "k..allen@enron.com"]


def test_extract_names_skips_bare_addresses() -> None:
    assert extract_names("john.arnold@enron.com, jeff.dasovich@enron.com") == []


def test_extract_names_keeps_display_names_with_diacritics() -> None:
    text = "José Núñez (Legal), Mary-Ann O <mary@enron.com>"

    assert extract_names(text) == ["José Núñez (Legal)", "Mary-Ann O"]


def test_extract_names_rejects_segments_with_other_characters() -> None:
    assert extract_names("'Smith, John' <john.smith@enron.com>") == []


def test_split_on_commas_trims_and_drops_empty_pieces() -> None:
    assert split_on_commas(" Phillip K Allen,  Tim Belden , ") == ["Phillip K Allen", "Tim Belden"]


def test_extract_addresses_ignores_non_ascii_local_part() -> None:
    assert extract_addresses("josé@enron.com, jose@enron.com") == ["jose@enron.com"]
