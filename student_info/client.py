# client.py (REST client walking through the student service)
import json

import requests

from .config import load_config

TIMEOUT = 10


def pp(title, obj):
    print(f"\n== {title} ==")
    print(json.dumps(obj, indent=2))


def body(r):
    return r.json() if r.content else None


def main():
    config = load_config()
    student_url = f"http://localhost:{config['SERVER_PORT']}"
    college_url = config["COLLEGE_SERVICE_URL"].rstrip("/")

    # --- SETUP: register a college with the college service (may be down) ---
    try:
        r = requests.post(f"{college_url}/college/", json={
            "id": 42,
            "collegeName": "City College",
            "address": "1 College Rd",
            "university": "State University",
        }, timeout=TIMEOUT)
        pp("SETUP create college 42", {"status": r.status_code, "body": body(r)})
    except requests.RequestException as e:
        pp("SETUP create college 42", {"error": str(e)})

    # --- STUDENTS: create two students of college 42 ---
    for name in ("Alice Smith", "Bob Jones"):
        r = requests.post(f"{student_url}/student/", json={
            "name": name,
            "address": "12 High St",
            "age": "21",
            "collegeId": "42",
        }, timeout=TIMEOUT)
        pp(f"create student {name}", {"status": r.status_code, "body": body(r)})

    # --- ENRICHMENT: placeholder college if the college service is down ---
    r = requests.get(f"{student_url}/student/std/42", timeout=TIMEOUT)
    pp("students of college 42 with college", {"status": r.status_code, "body": body(r)})

    r = requests.get(f"{student_url}/student/byCollegeOnly/42", timeout=TIMEOUT)
    pp("students of college 42 only", body(r))

    r = requests.get(f"{student_url}/student/name/Alice Smith", timeout=TIMEOUT)
    pp("student by name", {"status": r.status_code, "body": body(r)})

    r = requests.get(f"{student_url}/student/api/all", timeout=TIMEOUT)
    pp("all students", body(r))


if __name__ == "__main__":
    main()
