"""
Reset one user's study history by deleting their session file.
Their login stays in place; the next login starts with an empty list.
"""

import sys
from BackEnd.core.paths import sessions_path, user_data_dir
from BackEnd.repos import session_repo

def reset_user_stats(username, data_dir=None, ask=input):
    """Delete the user's session file after a yes/no confirmation."""
    if not username:
        print("No username given.")
        return False
    path = sessions_path(username, data_dir)

    if not path.exists():
        print(f"No sessions found for {username}. Stats are already at 0.")
        return False

    print(f"Found sessions at: {path}")
    confirm = ask(f"Are you sure you want to reset all stats for {username}? This cannot be undone. (yes/no): ")
    if confirm.strip().lower() not in ['yes', 'y']:
        print("Reset cancelled.")
        return False

    try:
        session_repo.delete_all(username, data_dir)
    except OSError as e:
        print(f"✗ Error deleting sessions: {e}")
        return False
    print("✓ Sessions deleted successfully!")
    print("✓ All stats have been reset to 0")
    return True

if __name__ == "__main__":
    print("=" * 50)
    print("Study Tracker - Reset All Stats")
    print("=" * 50)
    if len(sys.argv) > 1:
        name = sys.argv[1]
    else:
        name = input(f"Username (data in {user_data_dir()}): ").strip()
    reset_user_stats(name)
