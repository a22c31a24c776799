"""Domain layer for exptrack application.

Services live in their own modules (account, ledger, analytics) and are
imported from there; the persistence layer imports entities from this
package, so nothing is re-exported here.
"""
