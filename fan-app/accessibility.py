from __future__ import annotations

"""
Fan Controller - Accessibility Node Info

pygame has no accessibility layer of its own, so widgets describe themselves
with an AccessibilityNodeInfo that the hosting screen (or an external screen
reader bridge) can query.  A widget may install an AccessibilityDelegate to
add custom actions when its node info is built.
"""

from dataclasses import dataclass, field

# Action ids follow the Android AccessibilityNodeInfo constants.
ACTION_CLICK = 0x00000010


@dataclass(frozen=True)
class AccessibilityAction:
    action_id: int
    label: str | None = None


@dataclass
class AccessibilityNodeInfo:
    """Snapshot of what a widget exposes to assistive technology."""

    content_description: str = ""
    clickable: bool = False
    actions: list[AccessibilityAction] = field(default_factory=list)

    def add_action(self, action: AccessibilityAction) -> None:
        """Add *action*, replacing any existing action with the same id."""
        self.actions = [a for a in self.actions if a.action_id != action.action_id]
        self.actions.append(action)

    def get_action(self, action_id: int) -> AccessibilityAction | None:
        for action in self.actions:
            if action.action_id == action_id:
                return action
        return None


class AccessibilityDelegate:
    """Hook for customising a widget's node info.  The base does nothing."""

    def on_initialize_accessibility_node_info(self, host, info: AccessibilityNodeInfo) -> None:
        pass
