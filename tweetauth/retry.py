'''Bounded retry with backoff for calls to twitter.

Twitter's servers are occasionally overloaded, so a failed call is worth
trying again after a short sleep. Each call site decides what counts as
success, which failures are worth retrying, and how long to wait.
'''
import logging
import time

from tenacity import Retrying, stop_after_attempt

log = logging.getLogger(__name__)


def linear_backoff(step):
    '''Waits step, 2 * step, 3 * step... seconds.'''
    def backoff(attempt):
        return attempt * step
    return backoff


def fixed_backoff(seconds):
    '''Waits the same number of seconds after every failure.'''
    def backoff(attempt):
        return seconds
    return backoff


def _always(result):
    return True


def _log_sleep(retry_state):
    if retry_state.outcome.failed:
        outcome = repr(retry_state.outcome.exception())
    else:
        outcome = repr(retry_state.outcome.result())

    msg = 'Attempt {} of {} failed with {}, sleeping {}s'.format(
        retry_state.attempt_number,
        getattr(retry_state.fn, '__name__', 'operation'),
        outcome,
        retry_state.next_action.sleep
    )
    log.info(msg)


def retry(operation, max_attempts, backoff, succeeded,
          retryable=_always, exceptions=(), sleep=time.sleep):
    '''Calls operation until it succeeds or the attempts run out.

    Args:
        operation: callable taking no arguments.
        max_attempts: total number of calls allowed, including the first.
        backoff: callable mapping the 1-based number of the attempt that just
            failed to the seconds to sleep before the next one.
        succeeded: predicate on the operation's return value.
        retryable: predicate on an unsuccessful return value, False stops
            retrying straight away.
        exceptions: exception types that count as a retryable failure. Any
            other exception propagates immediately.
        sleep: callable used to sleep, swapped out in tests.

    Returns:
        the first successful result, or the last failed one.

    Raises:
        the last exception, if the last attempt raised one of exceptions.
    '''
    def should_retry(retry_state):
        outcome = retry_state.outcome
        if outcome.failed:
            return isinstance(outcome.exception(), exceptions)

        result = outcome.result()
        if succeeded(result):
            return False

        return retryable(result)

    retrying = Retrying(
        stop=stop_after_attempt(max_attempts),
        wait=lambda retry_state: backoff(retry_state.attempt_number),
        retry=should_retry,
        sleep=sleep,
        before_sleep=_log_sleep,
        retry_error_callback=lambda retry_state: retry_state.outcome.result(),
    )

    return retrying(operation)
