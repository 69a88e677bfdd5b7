"""
Demo Users Data for the Taskini application
One admin plus a handful of members across departments
"""

# Demo Users Data
# Structure: name, email, password, role and optional profile fields
DEMO_USERS = [
    {
        "name": "Admin",
        "email": "admin@taskini.test",
        "password": "password123",
        "role": "admin",
        "department": "Operations",
        "position": "Administrator",
    },
    {
        "name": "Ananya Rao",
        "email": "ananya.rao@taskini.test",
        "password": "password123",
        "role": "member",
        "department": "Engineering",
        "position": "Backend Developer",
        "phone": "+91-98765-43210",
        "bio": "Keeps the API fast and the database tidy.",
    },
    {
        "name": "Marco Bianchi",
        "email": "marco.bianchi@taskini.test",
        "password": "password123",
        "role": "member",
        "department": "Engineering",
        "position": "Frontend Developer",
    },
    {
        "name": "Sofia Lindqvist",
        "email": "sofia.lindqvist@taskini.test",
        "password": "password123",
        "role": "member",
        "department": "Marketing",
        "position": "Content Lead",
    },
    {
        "name": "Kwame Mensah",
        "email": "kwame.mensah@taskini.test",
        "password": "password123",
        "role": "member",
        "department": "Finance",
        "position": "Analyst",
    },
]


def get_users_by_department():
    """Return users grouped by department"""
    departments = {}
    for user_data in DEMO_USERS:
        departments.setdefault(user_data.get("department", "Unassigned"), []).append(user_data)
    return departments


if __name__ == "__main__":
    print("Demo Users Data")
    print("===============")
    print(f"Total Users: {len(DEMO_USERS)}")
    for dept, users in get_users_by_department().items():
        print(f"  {dept}: {', '.join(u['name'] for u in users)}")
