def _create(client, student_id: int, **fields):
    return client.post("/student-records/", json={"student_id": student_id, **fields})


def test_create_and_lookup_by_student(client, seed):
    r = _create(
        client,
        seed["student_id"],
        attendance=94,
        discipline="No incidents",
        transcript_pdf_url="https://files.example.com/transcripts/uoe-0001.pdf",
    )
    assert r.status_code == 201, r.text
    created = r.json()
    assert created["grades_pdf_url"] is None

    r = client.get(f"/student-records/student/{seed['student_id']}")
    assert r.status_code == 200
    assert r.json() == created

    assert [rec["id"] for rec in client.get("/student-records/").json()] == [created["id"]]


def test_one_record_per_student(client, seed):
    assert _create(client, seed["student_id"], attendance=80).status_code == 201
    assert _create(client, seed["student_id"], attendance=85).status_code == 409


def test_record_needs_existing_student(client, seed):
    r = _create(client, seed["student_id"] + 500, attendance=80)
    assert r.status_code == 404


def test_attendance_is_a_percentage(client, seed):
    assert _create(client, seed["student_id"], attendance=101).status_code == 422
    assert _create(client, seed["student_id"], attendance=-1).status_code == 422


def test_update_record(client, seed):
    record = _create(client, seed["student_id"], attendance=70).json()

    r = client.put(
        f"/student-records/{record['id']}",
        json={"attendance": 75, "diploma_pdf_url": "https://files.example.com/d.pdf"},
    )
    assert r.status_code == 200, r.text
    assert r.json()["attendance"] == 75
    assert r.json()["diploma_pdf_url"] == "https://files.example.com/d.pdf"

    r = client.put(f"/student-records/{record['id']}", json={"attendance": None})
    assert r.status_code == 422


def test_delete_record(client, seed):
    record = _create(client, seed["student_id"], attendance=70).json()

    assert client.delete(f"/student-records/{record['id']}").status_code == 204
    assert client.get(f"/student-records/student/{seed['student_id']}").status_code == 404
    assert client.delete(f"/student-records/{record['id']}").status_code == 404
