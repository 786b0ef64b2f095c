#!/usr/bin/env python3
import os
import sys
import unittest
from unittest.mock import Mock, patch

import requests

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from gchat_adapter.errors import ForwardError
from gchat_adapter.services import send_google_chat_payload

WEBHOOK_URL = 'https://chat.googleapis.com/v1/spaces/AAAA/messages?key=k&token=t'


class TestSendGoogleChatPayload(unittest.TestCase):
    @patch('gchat_adapter.services.requests.post')
    def test_posts_message_as_json(self, mock_post):
        mock_post.return_value = Mock(status_code=200, text='{}')
        resp = send_google_chat_payload({"text": "hi"}, WEBHOOK_URL, timeout=3)
        self.assertEqual(resp.status_code, 200)
        mock_post.assert_called_once_with(WEBHOOK_URL, json={"text": "hi"}, timeout=3)

    @patch('gchat_adapter.services.requests.post')
    def test_returns_non_200_response(self, mock_post):
        mock_post.return_value = Mock(status_code=429, text='rate limited')
        resp = send_google_chat_payload({"text": "hi"}, WEBHOOK_URL)
        self.assertEqual(resp.status_code, 429)

    @patch('gchat_adapter.services.requests.post')
    def test_transport_error_raises_forward_error(self, mock_post):
        mock_post.side_effect = requests.ConnectionError('connection refused')
        with self.assertRaises(ForwardError):
            send_google_chat_payload({"text": "hi"}, WEBHOOK_URL)

    @patch('gchat_adapter.services.requests.post')
    def test_timeout_raises_forward_error(self, mock_post):
        mock_post.side_effect = requests.Timeout('timed out')
        with self.assertRaises(ForwardError):
            send_google_chat_payload({"text": "hi"}, WEBHOOK_URL)


if __name__ == '__main__':
    unittest.main()
