from typing import Protocol


class AppHooks(Protocol):
    """
    Protocol for application hooks to follow report generation.
    This can be implemented by the calling application to display
    progress or to interrupt a long run.

    Methods:
        report_step(...): Progress message and counter update.
        stop_requested() -> bool: Whether the run should stop.
        update_key_value(key, value): Status update.
    """
    def report_step(self, info: str = None, target: int = None, reset_counter: bool = False, plus_step: int = 1) -> None:
        """
        Report progress of the report generation.

        Args:
            info (str): Progress message.
            target (int): Target count for progress.
            reset_counter (bool): Whether to reset the counter.
            plus_step (int): Incremental step count.
        """
        pass

    def stop_requested(self) -> bool:
        """
        Check if a stop has been requested by the user.

        Returns:
            bool: True if stop is requested, False otherwise.
        """
        return False

    def update_key_value(self, key: str, value) -> None:
        """
        Report a status update with a key-value pair.

        Args:
            key (str): Status key.
            value: Status value.
        """
        pass
