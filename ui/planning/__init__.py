from ui.planning.schedule_controller import ScheduleRecomputeController

__all__ = ["ScheduleRecomputeController"]
