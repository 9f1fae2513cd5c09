"""
Items API — Release Tooling
============================

What:  Version-bump utility used by release automation.
How:   `versioning` holds the pure logic (classify a commit message, bump a
       version string, rewrite a JSON manifest); `cli` wraps it in the
       `bump-version` click command.

Independent of the web application: nothing here imports FastAPI.
"""
