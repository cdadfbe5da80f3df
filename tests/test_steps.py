import unittest

from Photo_Scan.models import PinStatus, Scenario
from Photo_Scan.steps import (
    RoomType,
    StepStatus,
    common_misses,
    step_definitions,
    steps_for_room,
    summarize_steps,
)
from Photo_Scan.texts import OUTLET_WARNING, STEP_TITLES


class TestStepCatalogs(unittest.TestCase):
    def test_catalog_sizes(self) -> None:
        self.assertEqual(len(step_definitions("bedroom")), 9)
        self.assertEqual(len(step_definitions("hotel")), 10)
        self.assertEqual(len(step_definitions("living_room")), 8)

    def test_unknown_room_falls_back_to_bedroom(self) -> None:
        self.assertEqual(step_definitions("garage"), step_definitions(RoomType.BEDROOM.value))
        self.assertEqual(common_misses("garage"), ())

    def test_steps_are_seeded_with_pins(self) -> None:
        for room in RoomType:
            for step in steps_for_room(room.value):
                self.assertGreater(len(step.pins), 0, step.scenario)
                self.assertEqual(step.status, StepStatus.PENDING)
                self.assertEqual(step.title, STEP_TITLES[step.scenario])
                self.assertTrue(step.instruction)

    def test_mattress_step_has_single_pin(self) -> None:
        steps = {s.scenario: s for s in steps_for_room("bedroom")}
        self.assertEqual(len(steps[Scenario.MATTRESS_SEAMS].pins), 1)

    def test_outlet_step_carries_warning(self) -> None:
        steps = {s.scenario: s for s in steps_for_room("living_room")}
        self.assertEqual(steps[Scenario.OUTLET_AREA].warning, OUTLET_WARNING)
        self.assertIsNone(steps[Scenario.COUCH_OVERVIEW].warning)

    def test_every_scenario_has_texts(self) -> None:
        for scenario in Scenario:
            self.assertIn(scenario, STEP_TITLES)


class TestSummary(unittest.TestCase):
    def test_summarize(self) -> None:
        steps = steps_for_room("hotel")
        steps[0].status = StepStatus.REVIEWED
        steps[0].photo_uri = "file:///photos/1.jpg"
        steps[0].pins[0].status = PinStatus.CONCERNED
        steps[1].status = StepStatus.CAPTURED
        steps[1].photo_uri = "file:///photos/2.jpg"
        steps[2].pins[0].status = PinStatus.CHECKED

        summary = summarize_steps("hotel", steps)
        self.assertEqual(summary.total_steps, 10)
        self.assertEqual(summary.completed_steps, 1)
        self.assertEqual(summary.concerned_pins, 1)
        self.assertEqual(summary.photos_count, 2)
        self.assertIn("Nightstand drawer rails", summary.common_misses)

    def test_living_room_misses(self) -> None:
        self.assertIn("Area rug edges", common_misses("living_room"))


if __name__ == "__main__":
    unittest.main()
