"""Tests for Slack message builders (slack/messages.py)."""

from unittest.mock import MagicMock

from slack_notify.slack.messages import build_message, build_user_mention, github_profile_url
from slack_notify.types import Commit, CommitStatus, LookupResult, SlackUser


def _no_match(email):
    return LookupResult.miss('users_not_found')


class TestUserMention:
    def test_profile_url(self):
        assert github_profile_url('bob') == 'https://github.com/bob'

    def test_mention_with_slack_user(self):
        mention = build_user_mention(SlackUser(id='U123ABC'), 'alice')
        assert mention == '<@U123ABC> ([alice](https://github.com/alice))'

    def test_mention_without_slack_user(self):
        mention = build_user_mention(None, 'alice')
        assert mention == '[alice](https://github.com/alice)'
        assert '<@' not in mention


class TestBuildMessage:
    def test_end_to_end_without_match(self):
        commit = Commit(url='u', author_username='bob', author_email='bob@x.com',
                        commit_message='Fix bug\nmore detail')
        status = CommitStatus(name='build', description='', conclusion='failure', url='s')

        message = build_message(commit, status, _no_match)

        assert message == (
            ':warning: The commit <u|"_Fix bug_"> by [bob](https://github.com/bob) '
            'has failed the pipeline step <s|build>'
        )
        assert 'more detail' not in message

    def test_mentions_matched_user(self, sample_commit, failed_status):
        lookup = MagicMock(return_value=LookupResult.hit(SlackUser(id='U123ABC')))

        message = build_message(sample_commit, failed_status, lookup)

        lookup.assert_called_once_with('alice@users.noreply.github.com')
        assert 'by <@U123ABC> ([alice](https://github.com/alice)) has failed' in message
        assert '"_Fix flaky login test_"' in message
        assert '<https://ci.example.com/builds/42|ci/build>' in message

    def test_lookup_error_falls_back_to_link(self, sample_commit, failed_status):
        lookup = MagicMock(return_value=LookupResult.miss('ratelimited'))

        message = build_message(sample_commit, failed_status, lookup)

        assert '<@' not in message
        assert 'by [alice](https://github.com/alice) has failed' in message

    def test_wording_does_not_depend_on_conclusion(self, sample_commit):
        success = CommitStatus(name='ci/build', description='', conclusion='success', url='s')

        message = build_message(sample_commit, success, _no_match)

        assert success.succeeded
        assert message.startswith(':warning:')
        assert 'has failed the pipeline step' in message

    def test_raising_lookup_falls_back_to_link(self, sample_commit, failed_status):
        lookup = MagicMock(side_effect=RuntimeError('lookup blew up'))

        message = build_message(sample_commit, failed_status, lookup)

        lookup.assert_called_once_with('alice@users.noreply.github.com')
        assert '<@' not in message
        assert 'by [alice](https://github.com/alice) has failed' in message
