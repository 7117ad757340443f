"""State/store layer.

Collection stores bridge one remote collection resource into a locally
observable ``items`` field. Completion outcomes are modelled as the tagged
variants in :mod:`espclient.state.events`.
"""
