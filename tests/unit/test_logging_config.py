import logging

from app.logging_config import CredentialRedactingFilter


def make_record(msg, *args):
    return logging.LogRecord("test", logging.INFO, __file__, 1, msg, args, None)

def test_private_key_is_masked():
    record = make_record("Authorization: Bearer private_key:%s", "sk_live_123")

    assert CredentialRedactingFilter().filter(record) is True
    assert record.getMessage() == "Authorization: Bearer private_key:***"

def test_other_messages_untouched():
    record = make_record("Estimate returned: %s cents", 150)

    CredentialRedactingFilter().filter(record)
    assert record.getMessage() == "Estimate returned: 150 cents"
