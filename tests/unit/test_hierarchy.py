"""
Unit Tests - Category Hierarchy
"""
from marketplace_navigator.navigation import CategoryIndex, RelationalNavigator, category_path
from marketplace_navigator.navigation.hierarchy import category_paths_for_product
from marketplace_navigator.snapshot import Snapshot


def _categories(*rows):
    return Snapshot.from_raw({"CATEGORIES": list(rows)})


class TestCategoryPath:
    """Tests for root-to-leaf path resolution"""
    
    def test_root_is_own_name(self, snapshot):
        assert category_path(snapshot, 1) == "Apparel"
    
    def test_two_levels(self):
        snapshot = _categories(
            {"id": "A", "name": "A", "parent_id": "B"},
            {"id": "B", "name": "B", "parent_id": None},
        )
        
        assert category_path(snapshot, "A") == "B › A"
    
    def test_three_levels(self, snapshot):
        assert category_path(snapshot, 3) == "Apparel › Shoes › Running"
    
    def test_unknown_category(self, snapshot):
        assert category_path(snapshot, 404) == ""
    
    def test_dangling_parent_stops_walk(self):
        snapshot = _categories({"id": 1, "name": "Orphan", "parent_id": 50})
        
        assert category_path(snapshot, 1) == "Orphan"
    
    def test_custom_separator(self, snapshot):
        assert category_path(snapshot, 3, separator=" / ") == "Apparel / Shoes / Running"
    
    def test_two_node_cycle_terminates(self):
        """A parent=B, B parent=A yields a bounded path"""
        snapshot = _categories(
            {"id": "A", "name": "A", "parent_id": "B"},
            {"id": "B", "name": "B", "parent_id": "A"},
        )
        
        path = category_path(snapshot, "A")
        
        assert path == "B › A"
        assert len(path.split(" › ")) <= 2
    
    def test_self_parent_terminates(self):
        snapshot = _categories({"id": 1, "name": "Loop", "parent_id": 1})
        
        assert category_path(snapshot, 1) == "Loop"
    
    def test_cycle_below_leaf(self):
        snapshot = _categories(
            {"id": 1, "name": "Leaf", "parent_id": 2},
            {"id": 2, "name": "X", "parent_id": 3},
            {"id": 3, "name": "Y", "parent_id": 2},
        )
        
        names = category_path(snapshot, 1).split(" › ")
        
        assert names[-1] == "Leaf"
        assert len(names) <= 3


class TestCategoryIndex:
    """Tests for the reusable category index"""
    
    def test_index_reused(self, snapshot):
        index = CategoryIndex(snapshot)
        
        assert category_path(snapshot, 3, index=index) == "Apparel › Shoes › Running"
        assert len(index) == 4
    
    def test_first_duplicate_wins(self):
        snapshot = _categories(
            {"id": 1, "name": "First"},
            {"id": 1, "name": "Second"},
        )
        
        assert CategoryIndex(snapshot).get(1).name == "First"
    
    def test_navigator_builds_index_once(self, snapshot, test_settings):
        navigator = RelationalNavigator(snapshot, settings=test_settings)
        
        navigator.category_path(3)
        index = navigator.category_index
        navigator.category_path(2)
        
        assert navigator.category_index is index


class TestProductCategories:
    """Tests for product category composition"""
    
    def test_category_ids(self, navigator):
        assert navigator.product_category_ids(11) == [3, 77]
    
    def test_paths_degrade_to_id(self, snapshot):
        assert category_paths_for_product(snapshot, 11) == ["Apparel › Shoes › Running", "77"]
    
    def test_product_without_categories(self, navigator):
        assert navigator.product_category_paths(404) == []
