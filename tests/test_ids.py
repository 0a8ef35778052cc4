from enhance.ids import DEFAULT_ALPHABET, generate_id


def test_default_shape():
    value = generate_id()
    assert len(value) == 7
    assert set(value) <= set(DEFAULT_ALPHABET)


def test_custom_size_and_alphabet():
    assert generate_id(size=12, alphabet="ab").strip("ab") == ""
    assert len(generate_id(size=12)) == 12


def test_ids_differ():
    assert len({generate_id() for _ in range(100)}) == 100
