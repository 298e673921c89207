from stackgallery.services.camera_refs import preprocess_camera_refs, find_camera_refs


def test_camera_ref_becomes_markdown_link():
    text = 'Look at #camera-position(1,2,3) for the seam.'
    assert preprocess_camera_refs(text) == 'Look at [#camera-position(1,2,3)](#camera-position(1,2,3)) for the seam.'


def test_camera_ref_with_target_is_one_token():
    text = 'See #camera-position(0,1,5)-target(0,0,0)'
    token = '#camera-position(0,1,5)-target(0,0,0)'
    assert preprocess_camera_refs(text) == f'See [{token}]({token})'
    assert find_camera_refs(text) == [token]


def test_text_without_refs_is_unchanged():
    assert preprocess_camera_refs('no refs here #camera') == 'no refs here #camera'
    assert preprocess_camera_refs('') == ''
