from loguru import logger
import pytest

from rangewarden import Limit, Model, TooHigh, TooLow
from rangewarden.config import get_config, overrides, reset_config


class TestGlobalConfig:
  """Tests for global configuration settings."""

  def setup_method(self):
    """Reset config before each test."""
    reset_config()

  def teardown_method(self):
    """Reset config after each test."""
    reset_config()

  def test_defaults(self):
    config = get_config()
    assert config.warn_only is False
    assert config.report_all_boundary_violations is False
    assert config.value_type is int

  def test_global_warn_only_logs_error(self):
    """Test that warn_only logs the violation instead of raising."""
    get_config().warn_only = True
    messages = []
    handler_id = logger.add(messages.append, level="ERROR", format="{message}")
    try:
      model = Model()
      model.add_fixed(0, 1)
      assert model.validate_single(0, 2) is False
    finally:
      logger.remove(handler_id)
    assert len(messages) == 1
    assert "expected 1" in messages[0]

  def test_overrides_restores(self):
    with overrides(warn_only=True, report_all_boundary_violations=True):
      assert get_config().warn_only is True
      assert get_config().report_all_boundary_violations is True
    assert get_config().warn_only is False
    assert get_config().report_all_boundary_violations is False

  def test_overrides_unknown_key(self):
    with pytest.raises(AttributeError, match="no attribute 'nope'"):
      with overrides(warn_only=True, nope=1):
        pass
    assert get_config().warn_only is False

  def test_report_all_applies_to_model(self):
    model = Model()
    idx = model.add_boundary(0, top=Limit(10), bottom=Limit(0))
    # Force an inverted range to make both sides fail
    model.boundary(0, idx)._bottom = Limit(30)
    assert [type(v) for v in model.check_single(0, 20)] == [TooLow]
    with overrides(report_all_boundary_violations=True):
      assert [type(v) for v in model.check_single(0, 20)] == [TooLow, TooHigh]
