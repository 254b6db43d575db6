MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

class TimeManager:
    """Discrete simulation clock. One tick is one month."""

    def __init__(self, months_per_year: int = 12, starting_year: int = 0):
        self.months_per_year = months_per_year
        self.is_paused = False

        # Game World Calendar
        self.total_ticks = 0 # Total ticks since start
        self.month = 0
        self.year = starting_year

    def advance(self) -> int:
        """Step the calendar by one tick unless paused. Returns the current tick."""
        if self.is_paused:
            return self.total_ticks

        self.total_ticks += 1
        self.month += 1
        if self.month >= self.months_per_year:
            self.month = 0
            self.year += 1
        return self.total_ticks

    def toggle_pause(self):
        self.is_paused = not self.is_paused
        state = "PAUSED" if self.is_paused else "RESUMED"
        print(f"Simulation {state}")

    def get_month_name(self) -> str:
        if self.months_per_year == len(MONTH_NAMES):
            return MONTH_NAMES[self.month]
        return f"Month {self.month + 1}"

    def get_date_string(self) -> str:
        return f"{self.get_month_name()}, Year {self.year}"
