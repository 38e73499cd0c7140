"""A grade book that summarises the test grades of a class."""

from __future__ import annotations

from collections.abc import Sequence

STUDENTS = 10
SAMPLE_GRADES = (87, 68, 94, 100, 83, 78, 85, 91, 76, 87)
SAMPLE_COURSE = "Introduction to C++ Programming"


class GradeBook:
    """The grades of a fixed number of students in one course."""

    def __init__(self, course_name: str, grades: Sequence[int]) -> None:
        grades = tuple(grades)
        if len(grades) != STUDENTS:
            raise ValueError(f"a grade book holds exactly {STUDENTS} grades")
        if any(grade < 0 or grade > 100 for grade in grades):
            raise ValueError("grades must be between 0 and 100")
        self.course_name = course_name
        self.grades = grades

    def welcome_message(self) -> str:
        return f"Welcome to the GradeBook for {self.course_name}"

    def minimum(self) -> int:
        return min(self.grades)

    def maximum(self) -> int:
        return max(self.grades)

    def average(self) -> float:
        return sum(self.grades) / len(self.grades)

    def distribution(self) -> list[int]:
        """Count the grades in each band of ten, with 100 in a band of its own."""
        counts = [0] * 11
        for grade in self.grades:
            counts[grade // 10] += 1
        return counts

    def bar_chart(self) -> str:
        lines = []
        for band, count in enumerate(self.distribution()):
            if band == 0:
                label = "  0-9: "
            elif band == 10:
                label = "  100: "
            else:
                label = f"{band * 10}-{band * 10 + 9}: "
            lines.append(label + "*" * count)
        return "\n".join(lines) + "\n"

    def report(self) -> str:
        """The grades, their statistics and the distribution chart."""
        listing = "".join(
            f"Student {index}: {grade}\n" for index, grade in enumerate(self.grades)
        )
        return (
            "The grades are: \n\n"
            + listing
            + f"\nClass average is {self.average():g}\n"
            + f"Lowest grade is {self.minimum()}\n"
            + f"Highest grade is {self.maximum()}\n"
            + "\nGrade distribution: \n"
            + self.bar_chart()
        )


def main(argv=None) -> int:
    """Print the report of a sample grade book."""
    book = GradeBook(SAMPLE_COURSE, SAMPLE_GRADES)
    print(book.welcome_message())
    print(book.report(), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())