"""
Code used to poll a call until it reports completion.
"""

import logging
import time

from cloudways_varnish.exception import ConfigError

MAX_ATTEMPTS = 30
INTERVAL_MILLIS = 5000

LOG = logging.getLogger(__name__)


class PollManager:
    """
    Manages a bounded, fixed-interval polling loop.

    Each attempt sleeps for the interval and then calls the polled function once.
    The loop ends when the result satisfies ``is_complete`` or when
    ``max_attempts`` calls have been made.
    """

    def __init__(self, max_attempts=MAX_ATTEMPTS, interval_millis=INTERVAL_MILLIS, is_complete=bool):
        """
        Create a poll manager. Validates arguments.

        Arguments:
            max_attempts (int): number of times to call the polled function. Must be >= 1
            interval_millis (int): milliseconds to sleep before each call. Must be >= 0
            is_complete (function): predicate applied to each result
        """
        if max_attempts < 1:
            raise ConfigError(
                "Must specify a max_attempts number greater than or equal to 1. Value: {0}".format(max_attempts))

        if interval_millis < 0:
            raise ConfigError(
                "Must specify an interval_millis number greater than or equal to 0. Value: {0}".format(
                    interval_millis))

        self._current_attempt_number = 0
        self.max_attempts = int(max_attempts)
        self.interval_millis = int(interval_millis)
        self.is_complete = is_complete

    @property
    def attempts(self):
        return self._current_attempt_number

    def max_attempts_reached(self):
        """
        Returns:
            bool: True once the polled function has been called max_attempts times
        """
        return self._current_attempt_number >= self.max_attempts

    def get_delay_time(self):
        """
        Returns:
            float: seconds to delay
        """
        return self.interval_millis / 1000.0

    def sleep(self):
        """
        Sleep this poll manager
        """
        time.sleep(self.get_delay_time())

    def execute(self, func_to_poll, *args, **kwargs):
        """
        Call the polled function until its result is complete or attempts run out.

        Exceptions raised by the polled function are not caught.

        Arguments:
            func_to_poll (function): the function to execute
            args(list<any>): Arguments to the polled function
            kwargs(dict<str:any>): Keyword arguments to the polled function

        Returns:
            The first complete result, or None if max_attempts was reached first.
        """
        while not self.max_attempts_reached():
            self._current_attempt_number += 1
            self.sleep()
            LOG.debug("Poll attempt number: %s", self._current_attempt_number)
            result = func_to_poll(*args, **kwargs)
            if self.is_complete(result):
                return result
            LOG.info("Not completed yet, attempt %s of %s", self._current_attempt_number, self.max_attempts)

        return None
