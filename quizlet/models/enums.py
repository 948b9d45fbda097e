from enum import Enum


class EnumBase(Enum):
    def __str__(self):
        return self.value


class QuizType(EnumBase):
    SINGLE_CHOICE = 'single_choice'
    MULTI_CHOICE = 'multi_choice'
    TRUE_FALSE = 'true_false'
