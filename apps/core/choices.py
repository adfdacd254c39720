from django.db import models


class AssetType(models.TextChoices):
    """Whether a record belongs to one member or to the group's joint pot."""
    PERSONAL = 'PERSONAL', 'Personal'
    JOINT = 'JOINT', 'Joint'


class TransactionType(models.TextChoices):
    """Direction of money; also the kind of a budget category."""
    EXPENSE = 'EXPENSE', 'Expense'
    INCOME = 'INCOME', 'Income'
