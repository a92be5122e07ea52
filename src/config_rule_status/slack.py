"""Slack delivery of rule status reports."""
import time
import logging
from datetime import datetime, timezone, timedelta
from collections import deque

import requests

logger = logging.getLogger(__name__)


class SlackNotifier:
    """Posts report messages to a Slack webhook, rate limited and retried."""

    def __init__(self, config):
        self.config = config
        self.sent_at = deque(maxlen=max(config.rate_limit, 1))

    def _rate_limited(self, now):
        while self.sent_at and self.sent_at[0] < now - timedelta(seconds=60):
            self.sent_at.popleft()
        return len(self.sent_at) >= self.config.rate_limit

    def send(self, message, is_critical=False, metrics=None):
        """Send message to Slack. Returns True once the webhook accepts it."""
        if is_critical:
            message = f"\U0001f6a8 *CRITICAL* \U0001f6a8\n{message}"

        limit = self.config.max_message_length
        if len(message) > limit:
            marker = "\n...[truncated]"
            message = (message[:max(limit - len(marker), 0)] + marker)[:limit]

        payload = {
            "text": message,
            "blocks": [{"type": "section", "text": {"type": "mrkdwn", "text": message}}],
        }

        delivered = False
        for attempt in range(self.config.max_retries):
            now = datetime.now(timezone.utc)
            if self._rate_limited(now):
                logger.warning("Slack rate limit reached, waiting")
                time.sleep(1)
                continue

            try:
                response = requests.post(self.config.slack_webhook_url, json=payload, timeout=10)
            except requests.RequestException as e:
                logger.error(f"Slack error (attempt {attempt + 1}): {e}")
                if attempt < self.config.max_retries - 1:
                    time.sleep(self.config.retry_delay * (attempt + 1))
                continue

            self.sent_at.append(now)
            if response.status_code == 200:
                delivered = True
                break
            if response.status_code == 429:
                time.sleep(int(response.headers.get("Retry-After", self.config.retry_delay)))
            else:
                logger.warning(f"Slack returned {response.status_code} (attempt {attempt + 1})")
                if attempt < self.config.max_retries - 1:
                    time.sleep(self.config.retry_delay * (attempt + 1))

        if metrics is not None:
            metrics["notifications_sent" if delivered else "notifications_failed"] += 1
        return delivered
