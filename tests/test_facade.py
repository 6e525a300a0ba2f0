from patternshowcase.facade import (
    AuditLog,
    CardValidator,
    PaymentProcessor,
    run,
)


def test_validator_rejects_empty():
    assert CardValidator().validate("") is False


def test_validator_accepts_nonempty():
    assert CardValidator().validate("TEST-CARD") is True


def test_process_valid_card(capsys):
    ok = PaymentProcessor().process("TEST-CARD", "buyer@example.com", 150.0)
    assert ok is True
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Validating card: TEST-CARD",
        "Charging 150.00 to card TEST-CARD",
        "Sending receipt to buyer@example.com for amount $150.00",
        "Audit log: Charged TEST-CARD for $150.00",
    ]


def test_process_invalid_card_stops_early(capsys):
    ok = PaymentProcessor().process("", "buyer@example.com", 10.0)
    assert ok is False
    out = capsys.readouterr().out
    assert "Invalid card" in out
    assert "Charging" not in out
    assert "Audit log" not in out


class _RecordingLog(AuditLog):
    def __init__(self):
        self.entries = []

    def record(self, transaction):
        self.entries.append(transaction)


def test_subsystems_can_be_supplied():
    log = _RecordingLog()
    PaymentProcessor(logger=log).process("TEST-CARD", "buyer@example.com", 5.0)
    assert log.entries == ["Charged TEST-CARD for $5.00"]


def test_run_charges(capsys):
    run()
    out = capsys.readouterr().out
    assert "Invalid card" not in out
    assert out.splitlines()[-1].startswith("Audit log: Charged ")