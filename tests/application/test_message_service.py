"""
Test suite for MessageService.

System role: Verification of the in-memory message sink
"""

from herodesk.application.services import MessageService


class TestMessageService:
    """Test suite for MessageService add/clear."""

    def test_add_should_append_in_order(self) -> None:
        """Test messages keep insertion order."""
        # Arrange
        service = MessageService()

        # Act
        service.add("first")
        service.add("second")

        # Assert
        assert service.messages == ["first", "second"]

    def test_clear_should_drop_messages(self) -> None:
        """Test clear empties the sink."""
        # Arrange
        service = MessageService()
        service.add("first")

        # Act
        service.clear()

        # Assert
        assert service.messages == []
