"""Tests for the conversation serializer."""

from __future__ import annotations

from ai_stdio.l1_entities.conversation import Conversation, Message, Role
from ai_stdio.l2_use_cases.utils.conversation_parser import parse_conversation
from ai_stdio.l2_use_cases.utils.conversation_serializer import serialize_conversation


def _shape(conv: Conversation) -> tuple:
    return conv.title, [(m.role, m.content) for m in conv.messages]


class TestSerialize:
    def test_full_document(self):
        conv = Conversation(
            title='Chat',
            model='gpt-4',
            parameters={'temperature': '0.2'},
            messages=[
                Message(role=Role.USER, content='Hello'),
                Message(role=Role.ASSISTANT, content='Hi'),
            ],
        )
        assert serialize_conversation(conv) == (
            '---\nmodel: gpt-4\ntemperature: 0.2\n---\n\n# Chat\n\n## You\n\nHello\n\n### Response\n\nHi\n\n'
        )

    def test_no_front_matter_without_model_or_parameters(self):
        conv = Conversation(project_directory='/p', messages=[Message(role=Role.USER, content='x')])
        assert serialize_conversation(conv) == '## You\n\nx\n\n'

    def test_parameters_only(self):
        conv = Conversation(parameters={'a': '1'}, messages=[Message(role=Role.USER, content='x')])
        assert serialize_conversation(conv).startswith('---\na: 1\n---\n\n## You')


class TestRoundTrip:
    def test_semantic_round_trip(self, sample_document: str):
        first = parse_conversation(sample_document)
        second = parse_conversation(serialize_conversation(first))
        assert _shape(second) == _shape(first)
        assert second.model == first.model
        assert second.parameters == first.parameters

    def test_round_trip_preserves_internal_blank_lines(self):
        doc = '# T\n\n## You\n\nline one\n\n\nline two\n\n### Response\n\n```\ncode\n```\n'
        first = parse_conversation(doc)
        second = parse_conversation(serialize_conversation(first))
        assert _shape(second) == _shape(first)

    def test_round_trip_after_response(self, sample_document: str):
        conv = parse_conversation(sample_document)
        conv.add_response('Add a test for the empty case.')
        again = parse_conversation(serialize_conversation(conv))
        assert again.messages[-1].role is Role.ASSISTANT
        assert again.messages[-1].content == 'Add a test for the empty case.'
