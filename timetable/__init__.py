"""Weekly timetable with a relational backing store."""
