from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DashboardStats:
    total_employees: int = 0
    present_today: int = 0
    pending_leaves: int = 0

    def to_dict(self) -> dict:
        return {
            "totalEmployees": self.total_employees,
            "presentToday": self.present_today,
            "pendingLeaves": self.pending_leaves,
        }
