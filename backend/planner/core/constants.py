# backend/planner/core/constants.py

TOKEN_COOKIE_NAME = "token"
TOKEN_TTL_SECONDS = 60 * 60          # 1 saat
TOKEN_ALGORITHM = "HS256"

# Cloud Functions tavanı (540 sn) ile aynı
DEFAULT_REQUEST_TIMEOUT_SECONDS = 540.0

USERS_COLLECTION = "users"
FACULTIES_COLLECTION = "faculties"

ROLE_STUDENT = "Student"
ROLE_ADMIN = "Admin"
DEFAULT_ROLE = ROLE_STUDENT

# updateUser sadece bu alanları yazar; geri kalan her şey sessizce atılır
USER_ALLOWED_KEYS = frozenset({
    "role",
    "name",
    "email",
    "facultyId",
    "programId",
    "branchId",
    "year",
})

# PATCH /users/me: kullanıcı kendi rolünü değiştiremez (Admin sadece promote_admin ile)
SELF_SERVICE_KEYS = USER_ALLOWED_KEYS - {"role"}
