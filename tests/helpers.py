from wishdraw.models import Exclusion, Participant


def people(*names):
    return [Participant(id=index, name=name) for index, name in enumerate(names, start=1)]


def pair(a, b):
    return Exclusion(participant_a=a.id, participant_b=b.id)


def assert_valid_assignment(assignments, participants, exclusions=()):
    ids = [participant.id for participant in participants]
    givers = [assignment.giver_id for assignment in assignments]
    receivers = [assignment.receiver_id for assignment in assignments]

    assert len(assignments) == len(participants)
    assert sorted(givers) == sorted(ids)
    assert sorted(receivers) == sorted(ids)
    assert all(a.giver_id != a.receiver_id for a in assignments)

    forbidden = {frozenset((e.participant_a, e.participant_b)) for e in exclusions}
    assert all(frozenset((a.giver_id, a.receiver_id)) not in forbidden for a in assignments)
