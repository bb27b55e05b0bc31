import dataclasses
from unittest import TestCase

from mockjsep import MockIceCandidate, MockSessionDescription


class MockIceCandidateTest(TestCase):
    def test_defaults(self):
        candidate = MockIceCandidate()
        self.assertEqual(candidate.toSdp(), "a=candidate:Fake candidate")
        self.assertEqual(candidate.label, "first")

    def test_immutable(self):
        candidate = MockIceCandidate()
        with self.assertRaises(dataclasses.FrozenInstanceError):
            candidate.label = "second"


class MockSessionDescriptionTest(TestCase):
    def test_describe(self):
        desc = MockSessionDescription.describe("offer", 3, 2)
        self.assertEqual(
            desc.toSdp(), "Fake session description of offer from 3 with 2 streams"
        )
        self.assertEqual(desc.peerId, 3)
        self.assertIsNone(desc.registryId)

        desc = MockSessionDescription.describe("offer", 3, 2, registryId="abc")
        self.assertEqual(desc.registryId, "abc")

    def test_without_peer_id(self):
        desc = MockSessionDescription(sdp="v=0")
        self.assertEqual(desc.toSdp(), "v=0")
        self.assertIsNone(desc.peerId)

    def test_add_candidate(self):
        desc = MockSessionDescription.describe("answer", 1, 0)
        desc.addCandidate(MockIceCandidate())
        self.assertEqual(
            desc.toSdp(),
            "Fake session description of answer from 1 with 0 streams"
            "a=candidate:Fake candidate",
        )
        self.assertEqual(desc.peerId, 1)
