from .user import UserCreate, UserLogin, UserSummary, UserBasic, ProfileOut, ProfileUpdate, PasswordChange, PhotoOut, ProfileResponse, PhotoResponse, UserListResponse, MessageResponse
from .tokens import AuthResponse
from .task import TaskCreate, TaskUpdate, TaskOut, TaskResponse, TaskListResponse, TaskDeleteResponse
