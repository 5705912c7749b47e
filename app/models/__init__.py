from .account import Account
from .user import User
from .company import Company, EmployerProfile
from .job import JobPost, JobType, JobState
